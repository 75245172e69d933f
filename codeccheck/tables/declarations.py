"""
Static declarations of the media platform's integer constants.

Each table lists ``(name, value)`` pairs in the order the platform declares
them on ``MediaCodecInfo.CodecCapabilities`` and
``MediaCodecInfo.CodecProfileLevel``.  Order matters: when two names share a
value, resolution keeps the one declared last.
"""

from __future__ import annotations

from typing import Tuple

Declaration = Tuple[str, int]
DeclarationTable = Tuple[Declaration, ...]

CODEC_CAPABILITIES: DeclarationTable = (
    ("COLOR_FormatMonochrome", 1),
    ("COLOR_Format8bitRGB332", 2),
    ("COLOR_Format12bitRGB444", 3),
    ("COLOR_Format16bitARGB4444", 4),
    ("COLOR_Format16bitARGB1555", 5),
    ("COLOR_Format16bitRGB565", 6),
    ("COLOR_Format16bitBGR565", 7),
    ("COLOR_Format18bitRGB666", 8),
    ("COLOR_Format18bitARGB1665", 9),
    ("COLOR_Format19bitARGB1666", 10),
    ("COLOR_Format24bitRGB888", 11),
    ("COLOR_Format24bitBGR888", 12),
    ("COLOR_Format24bitARGB1887", 13),
    ("COLOR_Format25bitARGB1888", 14),
    ("COLOR_Format32bitBGRA8888", 15),
    ("COLOR_Format32bitARGB8888", 16),
    ("COLOR_FormatYUV411Planar", 17),
    ("COLOR_FormatYUV411PackedPlanar", 18),
    ("COLOR_FormatYUV420Planar", 19),
    ("COLOR_FormatYUV420PackedPlanar", 20),
    ("COLOR_FormatYUV420SemiPlanar", 21),
    ("COLOR_FormatYUV422Planar", 22),
    ("COLOR_FormatYUV422PackedPlanar", 23),
    ("COLOR_FormatYUV422SemiPlanar", 24),
    ("COLOR_FormatYCbYCr", 25),
    ("COLOR_FormatYCrYCb", 26),
    ("COLOR_FormatCbYCrY", 27),
    ("COLOR_FormatCrYCbY", 28),
    ("COLOR_FormatYUV444Interleaved", 29),
    ("COLOR_FormatRawBayer8bit", 30),
    ("COLOR_FormatRawBayer10bit", 31),
    ("COLOR_FormatRawBayer8bitcompressed", 32),
    ("COLOR_FormatL2", 33),
    ("COLOR_FormatL4", 34),
    ("COLOR_FormatL8", 35),
    ("COLOR_FormatL16", 36),
    ("COLOR_FormatL24", 37),
    ("COLOR_FormatL32", 38),
    ("COLOR_FormatYUV420PackedSemiPlanar", 39),
    ("COLOR_FormatYUV422PackedSemiPlanar", 40),
    ("COLOR_Format18BitBGR666", 41),
    ("COLOR_Format24BitARGB6666", 42),
    ("COLOR_Format24BitABGR6666", 43),
    ("COLOR_FormatYUVP010", 54),
    ("COLOR_TI_FormatYUV420PackedSemiPlanar", 0x7F000100),
    ("COLOR_FormatSurface", 0x7F000789),
    ("COLOR_Format32bitABGR8888", 0x7F00A000),
    ("COLOR_Format32bitABGR2101010", 0x7F00AAA2),
    ("COLOR_Format64bitABGRFloat", 0x7F000F16),
    ("COLOR_FormatYUV420Flexible", 0x7F420888),
    ("COLOR_FormatYUV422Flexible", 0x7F422888),
    ("COLOR_FormatYUV444Flexible", 0x7F444888),
    ("COLOR_FormatRGBFlexible", 0x7F36B888),
    ("COLOR_FormatRGBAFlexible", 0x7F36A888),
    ("COLOR_QCOM_FormatYUV420SemiPlanar", 0x7FA30C00),
)

CODEC_PROFILE_LEVEL: DeclarationTable = (
    # H.264 / AVC
    ("AVCProfileBaseline", 0x01),
    ("AVCProfileMain", 0x02),
    ("AVCProfileExtended", 0x04),
    ("AVCProfileHigh", 0x08),
    ("AVCProfileHigh10", 0x10),
    ("AVCProfileHigh422", 0x20),
    ("AVCProfileHigh444", 0x40),
    ("AVCProfileConstrainedBaseline", 0x10000),
    ("AVCProfileConstrainedHigh", 0x80000),
    ("AVCLevel1", 0x01),
    ("AVCLevel1b", 0x02),
    ("AVCLevel11", 0x04),
    ("AVCLevel12", 0x08),
    ("AVCLevel13", 0x10),
    ("AVCLevel2", 0x20),
    ("AVCLevel21", 0x40),
    ("AVCLevel22", 0x80),
    ("AVCLevel3", 0x100),
    ("AVCLevel31", 0x200),
    ("AVCLevel32", 0x400),
    ("AVCLevel4", 0x800),
    ("AVCLevel41", 0x1000),
    ("AVCLevel42", 0x2000),
    ("AVCLevel5", 0x4000),
    ("AVCLevel51", 0x8000),
    ("AVCLevel52", 0x10000),
    ("AVCLevel6", 0x20000),
    ("AVCLevel61", 0x40000),
    ("AVCLevel62", 0x80000),
    # VP8
    ("VP8Level_Version0", 0x01),
    ("VP8Level_Version1", 0x02),
    ("VP8Level_Version2", 0x04),
    ("VP8Level_Version3", 0x08),
    ("VP8ProfileMain", 0x01),
    # VP9
    ("VP9Profile0", 0x01),
    ("VP9Profile1", 0x02),
    ("VP9Profile2", 0x04),
    ("VP9Profile3", 0x08),
    ("VP9Profile2HDR", 0x1000),
    ("VP9Profile3HDR", 0x2000),
    ("VP9Profile2HDR10Plus", 0x4000),
    ("VP9Profile3HDR10Plus", 0x8000),
    ("VP9Level1", 0x01),
    ("VP9Level11", 0x02),
    ("VP9Level2", 0x04),
    ("VP9Level21", 0x08),
    ("VP9Level3", 0x10),
    ("VP9Level31", 0x20),
    ("VP9Level4", 0x40),
    ("VP9Level41", 0x80),
    ("VP9Level5", 0x100),
    ("VP9Level51", 0x200),
    ("VP9Level52", 0x400),
    ("VP9Level6", 0x800),
    ("VP9Level61", 0x1000),
    ("VP9Level62", 0x2000),
    # H.265 / HEVC
    ("HEVCProfileMain", 0x01),
    ("HEVCProfileMain10", 0x02),
    ("HEVCProfileMainStill", 0x04),
    ("HEVCProfileMain10HDR10", 0x1000),
    ("HEVCProfileMain10HDR10Plus", 0x2000),
    ("HEVCMainTierLevel1", 0x1),
    ("HEVCHighTierLevel1", 0x2),
    ("HEVCMainTierLevel2", 0x4),
    ("HEVCHighTierLevel2", 0x8),
    ("HEVCMainTierLevel21", 0x10),
    ("HEVCHighTierLevel21", 0x20),
    ("HEVCMainTierLevel3", 0x40),
    ("HEVCHighTierLevel3", 0x80),
    ("HEVCMainTierLevel31", 0x100),
    ("HEVCHighTierLevel31", 0x200),
    ("HEVCMainTierLevel4", 0x400),
    ("HEVCHighTierLevel4", 0x800),
    ("HEVCMainTierLevel41", 0x1000),
    ("HEVCHighTierLevel41", 0x2000),
    ("HEVCMainTierLevel5", 0x4000),
    ("HEVCHighTierLevel5", 0x8000),
    ("HEVCMainTierLevel51", 0x10000),
    ("HEVCHighTierLevel51", 0x20000),
    ("HEVCMainTierLevel52", 0x40000),
    ("HEVCHighTierLevel52", 0x80000),
    ("HEVCMainTierLevel6", 0x100000),
    ("HEVCHighTierLevel6", 0x200000),
    ("HEVCMainTierLevel61", 0x400000),
    ("HEVCHighTierLevel61", 0x800000),
    ("HEVCMainTierLevel62", 0x1000000),
    ("HEVCHighTierLevel62", 0x2000000),
    # AV1
    ("AV1ProfileMain8", 0x1),
    ("AV1ProfileMain10", 0x2),
    ("AV1ProfileMain10HDR10", 0x1000),
    ("AV1ProfileMain10HDR10Plus", 0x2000),
    ("AV1Level2", 0x1),
    ("AV1Level21", 0x2),
    ("AV1Level22", 0x4),
    ("AV1Level23", 0x8),
    ("AV1Level3", 0x10),
    ("AV1Level31", 0x20),
    ("AV1Level32", 0x40),
    ("AV1Level33", 0x80),
    ("AV1Level4", 0x100),
    ("AV1Level41", 0x200),
    ("AV1Level42", 0x400),
    ("AV1Level43", 0x800),
    ("AV1Level5", 0x1000),
    ("AV1Level51", 0x2000),
    ("AV1Level52", 0x4000),
    ("AV1Level53", 0x8000),
    ("AV1Level6", 0x10000),
    ("AV1Level61", 0x20000),
    ("AV1Level62", 0x40000),
    ("AV1Level63", 0x80000),
    ("AV1Level7", 0x100000),
    ("AV1Level71", 0x200000),
    ("AV1Level72", 0x400000),
    ("AV1Level73", 0x800000),
)
