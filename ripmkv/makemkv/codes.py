"""Attribute codes used in ``makemkvcon -r info`` output.

MakeMKV does not document these; the set below was worked out by comparing
robot output against the GUI.  Anything not listed ends up in the ``extra``
bag of the entity it belongs to.
"""

# ---------------------------------------------------------------------------
# CINFO:<code>,<msg>,"<value>"
# ---------------------------------------------------------------------------

CI_DISC_TYPE = 1  # "Blu-ray disc", "DVD disc"
CI_DISC_NAME = 2
CI_LANG_CODE = 28
CI_LANG_NAME = 29
CI_TITLE = 30
CI_UI_HEADER = 31
CI_VOLUME_LABEL = 32  # "UP_USA"
CI_LAYER_INFO = 33

# ---------------------------------------------------------------------------
# TINFO:<title>,<code>,<msg>,"<value>"
# ---------------------------------------------------------------------------

TI_NAME = 2
TI_CHAPTERS = 8
TI_DURATION = 9  # "1:36:09"
TI_SIZE_HUMAN = 10  # "28.5 GB"
TI_SIZE_BYTES = 11
TI_PLAYLIST = 16  # "00800.mpls" on Blu-ray, source file on DVD
TI_VIDEO_COUNT = 25
TI_AUDIO_COUNT = 26
TI_DEFAULT_OUTPUT_NAME = 27  # "title_t00.mkv"
TI_LANG_CODE = 28
TI_LANG_NAME = 29
TI_LONG_DESC = 30
TI_UI_HEADER = 31

# ---------------------------------------------------------------------------
# SINFO:<title>,<stream>,<code>,<msg>,"<value>"
# ---------------------------------------------------------------------------

SI_TYPE_NAME = 1  # "Video" | "Audio" | "Subtitles"
SI_ATTR = 2  # "Surround 5.1", "Stereo"
SI_LANG_CODE = 3
SI_LANG_NAME = 4
SI_CODEC_ID = 5  # "A_AC3", "V_MPEG4/ISO/AVC", "S_HDMV/PGS"
SI_CODEC_SHORT = 6  # "DD", "DTS-HD MA", "PGS"
SI_CODEC_LONG = 7
SI_BITRATE = 13  # "640 Kb/s"
SI_CHANNELS = 14
SI_SAMPLE_RATE = 17
SI_BITS_PER_SAMPLE = 18
SI_RESOLUTION = 19  # "1920x1080"
SI_ASPECT_RATIO = 20  # "16:9"
SI_FRAME_RATE = 21  # "23.976 (24000/1001)"
SI_PG_SIZE_OR_FLAG = 22
SI_LANG_CODE2 = 28
SI_LANG_NAME2 = 29
SI_LONG_DESC = 30  # "DD Surround 5.1 English"
SI_UI_HEADER = 31
SI_SOURCE_TRACK_ID = 33
SI_DEFAULT_FLAG = 39  # "Default" or absent
SI_CHANNEL_LAYOUT = 40  # "5.1(side)", "stereo"
SI_NOTES = 42  # "( Lossless conversion )"

# SI_TYPE_NAME values
STREAM_VIDEO = "Video"
STREAM_AUDIO = "Audio"
STREAM_SUBTITLES = "Subtitles"
