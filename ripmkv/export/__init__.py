"""Output formatters (text table, JSON) and rip output handling."""

from ripmkv.export.json_out import disc_to_dict, export_json
from ripmkv.export.rip import finalize_rips, rip_disc
from ripmkv.export.summary import summarize_audio, summarize_subtitles, summarize_video
from ripmkv.export.text_report import text_report
