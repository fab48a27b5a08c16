"""Tests for the per-title stream summaries."""

import pytest

from builders import build_audio, build_subtitle, build_video
from ripmkv.export.summary import (
    channel_weight,
    first_non_blank,
    format_channels,
    language_key,
    normalize_resolution,
    short_frame_rate,
    subtitle_flag_priority,
    subtitle_flags,
    summarize_audio,
    summarize_subtitles,
    summarize_video,
)
from ripmkv.model import AudioStream, Disc, SubtitleStream, VideoStream


class TestHelpers:
    @pytest.mark.parametrize(
        ("channels", "expected"),
        [(1, "1.0"), (2, "2.0"), (6, "5.1"), (8, "7.1"), (3, "3"), (0, "0")],
    )
    def test_format_channels(self, channels: int, expected: str) -> None:
        assert format_channels(channels) == expected

    def test_channel_weight_order(self) -> None:
        weights = [channel_weight(c) for c in ("7.1", "5.1", "2.0", "1.0", "3")]
        assert weights == [3, 2, 1, 0, 0]

    def test_first_non_blank(self) -> None:
        assert first_non_blank("", "  ", "DTS") == "DTS"
        assert first_non_blank("", " ") == "?"

    def test_language_key(self) -> None:
        assert language_key("ENG", "English") == "eng"
        assert language_key("", "English") == "english"
        assert language_key("", "") == "und"

    @pytest.mark.parametrize(
        ("description", "expected"),
        [
            ("PGS English", ""),
            ("PGS English  ( forced only )", "⚑"),
            ("English (SDH)", "ⓢ"),
            ("English HoH", "ⓢ"),
            ("Forced SDH", "⚑ⓢ"),
            ("", ""),
        ],
    )
    def test_subtitle_flags(self, description: str, expected: str) -> None:
        assert subtitle_flags(description) == expected

    def test_flag_priority(self) -> None:
        assert [subtitle_flag_priority(f) for f in ("", "⚑", "ⓢ", "⚑ⓢ", "x")] == [0, 1, 2, 3, 0]

    def test_resolution_exact_match_only(self) -> None:
        assert normalize_resolution("1920x1080") == "1080p"
        assert normalize_resolution("3840x2160") == "2160p"
        assert normalize_resolution("1280x720") == "720p"
        assert normalize_resolution("1918x1078") == "1918x1078"
        assert normalize_resolution("720x480") == "720x480"

    def test_short_frame_rate(self) -> None:
        assert short_frame_rate("23.976 (24000/1001)") == "23.976"
        assert short_frame_rate("25") == "25"
        assert short_frame_rate(" 25") == " 25"
        assert short_frame_rate("") == ""


class TestSummarizeAudio:
    def test_empty(self) -> None:
        assert summarize_audio([]) == "—"

    def test_duplicates_collapse_with_default(self) -> None:
        streams = [build_audio("eng", 6, "DD"), build_audio("eng", 6, "DD", default=True)]
        assert summarize_audio(streams) == "eng: 5.1 DD*"

    def test_ordering_within_language(self) -> None:
        streams = [
            build_audio("eng", 2, "DD"),
            build_audio("eng", 6, "DTS"),
            build_audio("eng", 8, "TrueHD"),
            build_audio("eng", 6, "DD"),
            build_audio("eng", 1, "LPCM"),
        ]
        assert summarize_audio(streams) == "eng: 7.1 TrueHD • 5.1 DD • 5.1 DTS • 2.0 DD • 1.0 LPCM"

    def test_languages_sorted(self) -> None:
        streams = [build_audio("jpn", 2, "DD"), build_audio("eng", 6, "DD")]
        assert summarize_audio(streams) == "eng: 5.1 DD / jpn: 2.0 DD"

    def test_missing_language_and_codec(self) -> None:
        assert summarize_audio([AudioStream(channels=2)]) == "und: 2.0 ?"

    def test_codec_falls_back_to_long_then_id(self) -> None:
        a = AudioStream(codec_long="Dolby Digital", codec_id="A_AC3", lang_code="eng", channels=6)
        b = AudioStream(codec_id="A_DTS", lang_code="eng", channels=6)
        assert summarize_audio([a, b]) == "eng: 5.1 A_DTS • 5.1 Dolby Digital"

    def test_bundled_capture(self, disc: Disc) -> None:
        assert summarize_audio(disc.titles[0].audio) == "eng: 7.1 TrueHD* • 5.1 DD / fra: 5.1 DD"
        assert summarize_audio(disc.titles[1].audio) == "eng: 2.0 DD"
        assert summarize_audio(disc.titles[2].audio) == "—"


class TestSummarizeSubtitles:
    def test_empty(self) -> None:
        assert summarize_subtitles([]) == "—"

    def test_sdh_without_default(self) -> None:
        assert summarize_subtitles([build_subtitle("eng", "English (SDH)")]) == "engⓢ"

    def test_dedup_and_flag_order(self) -> None:
        streams = [
            build_subtitle("eng", "Forced SDH"),
            build_subtitle("eng", "English (SDH)"),
            build_subtitle("eng", "forced"),
            build_subtitle("eng", "English"),
            build_subtitle("eng", "English", default=True),
            build_subtitle("deu", "Deutsch"),
        ]
        assert summarize_subtitles(streams) == "deu, eng*, eng⚑, engⓢ, eng⚑ⓢ"

    def test_language_name_fallback(self) -> None:
        assert summarize_subtitles([SubtitleStream(lang_name="French")]) == "french"
        assert summarize_subtitles([SubtitleStream()]) == "und"

    def test_bundled_capture(self, disc: Disc) -> None:
        assert summarize_subtitles(disc.titles[0].subtitles) == "eng*, eng⚑, engⓢ, spa"
        assert summarize_subtitles(disc.titles[1].subtitles) == "—"


class TestSummarizeVideo:
    def test_empty(self) -> None:
        assert summarize_video([]) == "—"

    def test_first_stream_only(self) -> None:
        streams = [build_video("Mpeg4"), build_video("Mpeg2", "720x480", "29.97")]
        assert summarize_video(streams) == "Mpeg4 • 1080p • 23.976"

    def test_missing_fields(self) -> None:
        assert summarize_video([VideoStream()]) == "? •  • "

    def test_bundled_capture(self, disc: Disc) -> None:
        assert summarize_video(disc.titles[0].video) == "Mpeg4 • 1080p • 23.976"
        assert summarize_video(disc.titles[1].video) == "Mpeg2 • 720p • 59.94"
