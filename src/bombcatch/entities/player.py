"""Paddle and bucket stack controlled by the player."""

from __future__ import annotations

from dataclasses import dataclass, field

from bombcatch.config import GameConfig
from bombcatch.entities.body import Body


@dataclass
class PlayerPose:
    paddle: Body
    # Ordered top to bottom; the lowest bucket sits last so pop() loses it first.
    buckets: list[Body] = field(default_factory=list)
    vx: float = 0.0
    vx_target: float = 0.0

    @classmethod
    def spawn(cls, config: GameConfig) -> "PlayerPose":
        layout = config.layout
        paddle = Body(
            x=config.screen.width / 2,
            y=config.screen.height - layout.paddle_offset,
            width=layout.paddle_size.width,
            height=layout.paddle_size.height,
            visible=False,
        )

        bucket_h = layout.bucket_size.height
        buckets = [
            Body(
                x=paddle.x,
                y=paddle.y - i * (bucket_h + layout.bucket_gap) - bucket_h / 2,
                width=layout.bucket_size.width,
                height=bucket_h,
            )
            for i in range(layout.bucket_count)
        ]
        buckets.reverse()
        return cls(paddle=paddle, buckets=buckets)

    @property
    def bucket_count(self) -> int:
        return len(self.buckets)

    def advance(self, elapsed: float, screen_width: float) -> None:
        if not self.buckets:
            return
        self.vx = (self.vx + self.vx_target) / 2
        half_width = self.buckets[0].width / 2
        self.paddle.x = max(half_width, min(self.paddle.x + self.vx * elapsed, screen_width - half_width))
        for bucket in self.buckets:
            bucket.x = self.paddle.x

    def lose_bucket(self) -> Body | None:
        if not self.buckets:
            return None
        bucket = self.buckets.pop()
        bucket.destroy()
        return bucket
