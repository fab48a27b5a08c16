from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Container:
    """Disc-level attributes from CINFO records."""

    disc_type: str = ""
    disc_name: str = ""
    lang_code: str = ""
    lang_name: str = ""
    title: str = ""
    ui_header: str = ""
    volume_label: str = ""
    layer_info: str = ""
    extra: dict[int, str] = field(default_factory=dict)


@dataclass(slots=True)
class VideoStream:
    codec_id: str = ""
    codec_short: str = ""
    codec_long: str = ""
    bitrate: str = ""
    resolution: str = ""
    aspect_ratio: str = ""
    frame_rate: str = ""


@dataclass(slots=True)
class AudioStream:
    codec_id: str = ""
    codec_short: str = ""
    codec_long: str = ""
    lang_code: str = ""
    lang_name: str = ""
    description: str = ""  # e.g. "Surround 5.1"
    channels: int = 0
    layout: str = ""
    sample_rate: int = 0
    bits_per_sample: int = 0
    default: bool = False


@dataclass(slots=True)
class SubtitleStream:
    codec_id: str = ""
    codec_short: str = ""
    codec_long: str = ""
    lang_code: str = ""
    lang_name: str = ""
    description: str = ""
    default: bool = False


@dataclass(slots=True)
class Stream:
    """Every SINFO field seen for one (title, stream) pair."""

    title_id: int
    stream_id: int
    type_name: str = ""  # "Video" | "Audio" | "Subtitles"
    attr: str = ""
    lang_code: str = ""
    lang_name: str = ""
    codec_id: str = ""
    codec_short: str = ""
    codec_long: str = ""
    bitrate: str = ""
    channels: int = 0
    sample_rate: int = 0
    bits_per_sample: int = 0
    resolution: str = ""
    aspect_ratio: str = ""
    frame_rate: str = ""
    pg_size_or_flag: str = ""
    lang_code2: str = ""
    lang_name2: str = ""
    long_desc: str = ""
    ui_header: str = ""
    source_track_id: str = ""
    default: bool = False
    channel_layout: str = ""
    notes: str = ""
    extra: dict[int, str] = field(default_factory=dict)

    def to_video(self) -> VideoStream:
        return VideoStream(
            codec_id=self.codec_id,
            codec_short=self.codec_short,
            codec_long=self.codec_long,
            bitrate=self.bitrate,
            resolution=self.resolution,
            aspect_ratio=self.aspect_ratio,
            frame_rate=self.frame_rate,
        )

    def to_audio(self) -> AudioStream:
        return AudioStream(
            codec_id=self.codec_id,
            codec_short=self.codec_short,
            codec_long=self.codec_long,
            lang_code=self.lang_code,
            lang_name=self.lang_name,
            description=self.attr,
            channels=self.channels,
            layout=self.channel_layout,
            sample_rate=self.sample_rate,
            bits_per_sample=self.bits_per_sample,
            default=self.default,
        )

    def to_subtitle(self) -> SubtitleStream:
        return SubtitleStream(
            codec_id=self.codec_id,
            codec_short=self.codec_short,
            codec_long=self.codec_long,
            lang_code=self.lang_code,
            lang_name=self.lang_name,
            description=self.long_desc,
            default=self.default,
        )


@dataclass(slots=True)
class Title:
    """A playable title (MakeMKV calls it a track) and its streams."""

    title_id: int
    name: str = ""
    chapters: int = 0
    duration: str = ""  # "H:MM:SS", kept as text
    size_human: str = ""
    size_bytes: int = 0
    playlist: str = ""  # e.g. "00800.mpls"
    video_count: int = 0
    audio_count: int = 0
    default_output_name: str = ""
    lang_code: str = ""
    lang_name: str = ""
    long_desc: str = ""
    ui_header: str = ""
    extra: dict[int, str] = field(default_factory=dict)
    video: list[VideoStream] = field(default_factory=list)
    audio: list[AudioStream] = field(default_factory=list)
    subtitles: list[SubtitleStream] = field(default_factory=list)


@dataclass(slots=True)
class Disc:
    disc_type: str
    name: str
    volume: str
    container: Container
    titles: list[Title] = field(default_factory=list)
