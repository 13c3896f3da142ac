#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

"""Usage metadata attached to app results for usage-based pricing.

Example:
    .. code-block:: python

        return {
            "result": generated_text,
            "output_meta": OutputMeta(
                inputs=[text_meta(tokens=prompt_tokens)],
                outputs=[text_meta(tokens=completion_tokens)],
            ).to_dict(),
        }
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

MetaItemType = Literal["text", "image", "video", "audio", "raw"]
VideoResolution = Literal["480p", "720p", "1080p", "1440p", "4k"]


class MetaItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: MetaItemType = Field(...)
    """Kind of content the item accounts for."""
    tokens: int | None = Field(None, ge=0)
    """Token count, for text."""
    width: int | None = Field(None, ge=1)
    """Width in pixels, for images and video."""
    height: int | None = Field(None, ge=1)
    """Height in pixels, for images and video."""
    steps: int | None = Field(None, ge=1)
    """Inference steps, for generated images."""
    count: int | None = Field(None, ge=1)
    """Number of generated items."""
    resolution: VideoResolution | None = None
    """Resolution preset, for video."""
    seconds: float | None = Field(None, ge=0)
    """Duration, for video and audio."""
    fps: int | None = Field(None, ge=1)
    """Frames per second, for video."""
    cost: float | None = Field(None, ge=0)
    """Explicit cost, for raw items with custom pricing."""
    extra: dict[str, Any] | None = None
    """Free-form additional data."""

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class OutputMeta(BaseModel):
    inputs: list[MetaItem] | None = None
    """Items consumed by the run."""
    outputs: list[MetaItem] | None = None
    """Items produced by the run."""

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def text_meta(*, tokens: int, **fields: Any) -> MetaItem:
    """Create a text metadata item."""
    return MetaItem(type="text", tokens=tokens, **fields)


def image_meta(**fields: Any) -> MetaItem:
    """Create an image metadata item."""
    return MetaItem(type="image", **fields)


def video_meta(**fields: Any) -> MetaItem:
    """Create a video metadata item."""
    return MetaItem(type="video", **fields)


def audio_meta(**fields: Any) -> MetaItem:
    """Create an audio metadata item."""
    return MetaItem(type="audio", **fields)


def raw_meta(**fields: Any) -> MetaItem:
    """Create a raw metadata item (custom pricing)."""
    return MetaItem(type="raw", **fields)
