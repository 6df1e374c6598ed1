"""
Shapes of the ixigua.com embedded page state.

The page ships one of two mutually exclusive shapes: a single work (with a
normal ladder and a dynamic video/audio ladder) or an episode of an album
(normal ladder only). Missing or null fields fall back to empty values the
way the page omits them; a field of the wrong type is a decode error.
"""
from __future__ import annotations
import json
import logging
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..errors import DecodeFailed

log = logging.getLogger("siphon.extractors.ixigua")

Shape = Literal["single_work", "episode"]

NORMAL_SLOTS = ("video_1", "video_2", "video_3", "video_4")


class _Node(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class VideoCandidate(_Node):
    definition: str = ""
    main_url: str = ""


class NormalLadder(_Node):
    """The four fixed fallback renditions, in slot order."""
    slots: tuple[VideoCandidate, VideoCandidate, VideoCandidate, VideoCandidate] = Field(
        default_factory=lambda: tuple(VideoCandidate() for _ in NORMAL_SLOTS))

    @model_validator(mode="before")
    @classmethod
    def _from_video_list(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict) and "slots" not in data:
            return {"slots": [data.get(k) or {} for k in NORMAL_SLOTS]}
        return data


class _Normal(_Node):
    video_list: NormalLadder = Field(default_factory=NormalLadder)


class DynamicVideo(_Node):
    dynamic_video_list: list[VideoCandidate] = Field(default_factory=list)
    dynamic_audio_list: list[VideoCandidate] = Field(default_factory=list)


class _Dash120Fps(_Node):
    dynamic_video: DynamicVideo = Field(default_factory=DynamicVideo)


class VideoResource(_Node):
    normal: _Normal = Field(default_factory=_Normal)
    dash_120fps: _Dash120Fps = Field(default_factory=_Dash120Fps)

    @property
    def normal_ladder(self) -> NormalLadder:
        return self.normal.video_list

    @property
    def dynamic(self) -> DynamicVideo:
        return self.dash_120fps.dynamic_video


# ── single work ──────────────────

class _Video(_Node):
    title: str = ""
    video_resource: VideoResource = Field(default_factory=VideoResource, alias="videoResource")


class _SinglePacker(_Node):
    video: _Video


class _SingleGid(_Node):
    packer_data: _SinglePacker = Field(alias="packerData")


class _SingleAnyVideo(_Node):
    gid_information: _SingleGid = Field(alias="gidInformation")


class SingleWorkState(_Node):
    shape: Literal["single_work"] = "single_work"
    any_video: _SingleAnyVideo = Field(alias="anyVideo")

    @property
    def title(self) -> str:
        return self.any_video.gid_information.packer_data.video.title

    @property
    def resource(self) -> VideoResource:
        return self.any_video.gid_information.packer_data.video.video_resource


# ── episode ──────────────────

class _EpisodeInfo(_Node):
    title: str = ""
    name: str = ""


class _EpisodePacker(_Node):
    episode_info: _EpisodeInfo = Field(alias="episodeInfo")
    video_resource: VideoResource = Field(default_factory=VideoResource, alias="videoResource")


class _EpisodeGid(_Node):
    packer_data: _EpisodePacker = Field(alias="packerData")


class _EpisodeAnyVideo(_Node):
    gid_information: _EpisodeGid = Field(alias="gidInformation")


class EpisodeState(_Node):
    shape: Literal["episode"] = "episode"
    any_video: _EpisodeAnyVideo = Field(alias="anyVideo")

    @property
    def title(self) -> str:
        info = self.any_video.gid_information.packer_data.episode_info
        return f"{info.title} {info.name}"

    @property
    def resource(self) -> VideoResource:
        return self.any_video.gid_information.packer_data.video_resource


PageState = Union[SingleWorkState, EpisodeState]

_MODELS: dict[str, type[BaseModel]] = {
    "single_work": SingleWorkState,
    "episode": EpisodeState,
}


def decode_state(text: str, preferred: Shape) -> PageState:
    """
    Decode sanitised JSON into a page state.

    The preferred shape is tried first, then the other one. Only when neither
    validates is DecodeFailed raised.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeFailed(f"embedded state is not valid JSON: {e}") from e

    order = [preferred] + [s for s in _MODELS if s != preferred]
    errors = []
    for shape in order:
        try:
            state = _MODELS[shape].model_validate(data)
        except ValidationError as e:
            errors.append(f"{shape}: {e.error_count()} error(s), first: {e.errors()[0]['msg']}")
            continue
        if shape != preferred:
            log.warning(f"Page looked like {preferred} but decoded as {shape}")
        return state
    raise DecodeFailed("embedded state matches no known shape (" + "; ".join(errors) + ")")
