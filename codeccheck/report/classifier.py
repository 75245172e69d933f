"""
Name and MIME based codec classification.
"""

from __future__ import annotations

HARDWARE_TOKENS = ("qcom", "mtk", "exynos", "intel", "nvidia", "arm", "c2.", "omx.")
SOFTWARE_TOKENS = ("google", "android")


def classify_hw(codec_name: str) -> bool:
    """
    Guess whether a codec is hardware backed from its name.

    The platform has no universal hardware flag, so vendor tokens are matched
    and the platform's own software implementations are excluded.  Names like
    ``c2.android.*`` or ``OMX.google.*`` are software even though they carry a
    generic ``c2.``/``omx.`` prefix.
    """

    lower = codec_name.lower()
    if any(token in lower for token in SOFTWARE_TOKENS):
        return False
    return any(token in lower for token in HARDWARE_TOKENS)


def classify_audio(first_supported_type: str | None) -> bool:
    # Only the first declared type is consulted, even for mixed codecs.
    if not first_supported_type:
        return False
    return first_supported_type.lower().startswith("audio/")
