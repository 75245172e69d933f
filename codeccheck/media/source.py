"""
Media subsystem adapters.

A :class:`MediaCodecSource` answers the two questions the report needs: which
codecs exist, and what a codec supports for a given MIME type.  The in-memory
source backs tests and embedding; the snapshot source replays a YAML capture
of what a device's media subsystem reported.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import yaml

from .types import CodecEntry, DeviceInfo, ProfileLevel, RawCodecDescriptor, RawTypeCapabilities

LOG = logging.getLogger(__name__)

EMPTY_CAPABILITIES = RawTypeCapabilities()


class SnapshotError(RuntimeError):
    """Raised when a snapshot file exists but cannot be interpreted."""


class MediaCodecSource:
    """
    Base interface for media subsystem adapters.
    """

    def device_info(self) -> DeviceInfo:
        return DeviceInfo()

    def codecs(self) -> Sequence[RawCodecDescriptor]:  # pragma: no cover - interface
        raise NotImplementedError

    def capabilities_for_type(
        self, descriptor: RawCodecDescriptor, mime: str, position: Optional[int] = None
    ) -> RawTypeCapabilities:  # pragma: no cover - interface
        """
        Capabilities of ``descriptor`` for ``mime``.

        ``position`` is the index of ``mime`` in ``descriptor.supported_types``
        and disambiguates a type the codec lists more than once.
        """
        raise NotImplementedError


class StaticCodecSource(MediaCodecSource):
    """
    Source backed by an in-memory list of codec entries.
    """

    def __init__(self, entries: Iterable[CodecEntry] = (), device: Optional[DeviceInfo] = None) -> None:
        self._entries: List[CodecEntry] = list(entries)
        # Keyed by identity: snapshots may list value-equal codecs twice.
        self._by_id: Dict[int, CodecEntry] = {id(entry.descriptor): entry for entry in self._entries}
        self._device = device or DeviceInfo()

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "StaticCodecSource":
        """
        Build a source from the snapshot document layout.
        """

        entries, device = _parse_snapshot(payload)
        return cls(entries, device=device)

    def device_info(self) -> DeviceInfo:
        return self._device

    def codecs(self) -> Sequence[RawCodecDescriptor]:
        return [entry.descriptor for entry in self._entries]

    def capabilities_for_type(
        self, descriptor: RawCodecDescriptor, mime: str, position: Optional[int] = None
    ) -> RawTypeCapabilities:
        entry = self._by_id.get(id(descriptor))
        if entry is None:
            entry = next((e for e in self._entries if e.descriptor == descriptor), None)
        if entry is None:
            return EMPTY_CAPABILITIES
        if position is not None and entry.descriptor.supported_types[position : position + 1] == (mime,):
            return entry.capabilities_at(position)
        return entry.capabilities_for(mime)


class SnapshotCodecSource(StaticCodecSource):
    """
    Source replaying a YAML capture of a device's codec list.

    A missing or unreadable file behaves like a device that reports no codecs;
    a file that reads but does not decode or parse raises :class:`SnapshotError`.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()
        payload = self._load(self.path)
        entries, device = _parse_snapshot(payload)
        super().__init__(entries, device=device)
        LOG.info("Loaded %d codecs from snapshot %s", len(self._entries), self.path)

    @staticmethod
    def _load(path: Path) -> Mapping[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                payload = yaml.safe_load(handle)
        except FileNotFoundError:
            LOG.warning("Snapshot %s not found; reporting no codecs.", path)
            return {}
        except OSError as exc:
            LOG.warning("Snapshot %s unreadable (%s); reporting no codecs.", path, exc)
            return {}
        except UnicodeDecodeError as exc:
            raise SnapshotError(f"Snapshot {path} is not valid UTF-8: {exc}") from exc
        except yaml.YAMLError as exc:
            raise SnapshotError(f"Invalid YAML in snapshot {path}: {exc}") from exc
        return payload or {}


def _parse_snapshot(payload: Any) -> Tuple[List[CodecEntry], DeviceInfo]:
    if not isinstance(payload, Mapping):
        raise SnapshotError(f"Snapshot must be a mapping, got {type(payload).__name__}")

    device_payload = payload.get("device") or {}
    if not isinstance(device_payload, Mapping):
        raise SnapshotError("'device' must be a mapping")
    device = DeviceInfo(
        manufacturer=str(device_payload.get("manufacturer") or "unknown"),
        model=str(device_payload.get("model") or "unknown"),
    )

    codecs_payload = payload.get("codecs") or []
    if not isinstance(codecs_payload, list):
        raise SnapshotError("'codecs' must be a list")

    entries = [_parse_codec(index, item) for index, item in enumerate(codecs_payload)]
    return entries, device


def _coerce_int(value: Any, where: str) -> int:
    if isinstance(value, bool):
        raise SnapshotError(f"{where}: expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip(), 0)
    except (TypeError, ValueError):
        raise SnapshotError(f"{where}: expected an integer, got {value!r}") from None


def _parse_profile_level(value: Any, where: str) -> ProfileLevel:
    if isinstance(value, Mapping):
        profile, level = value.get("profile"), value.get("level")
    elif isinstance(value, (list, tuple)) and len(value) == 2:
        profile, level = value
    else:
        raise SnapshotError(f"{where}: expected [profile, level], got {value!r}")
    return ProfileLevel(profile=_coerce_int(profile, where), level=_coerce_int(level, where))


def _parse_type(codec_name: str, item: Any) -> Tuple[str, RawTypeCapabilities]:
    if isinstance(item, str):
        return item, EMPTY_CAPABILITIES
    if not isinstance(item, Mapping) or not item.get("mime"):
        raise SnapshotError(f"{codec_name}: type entries need a 'mime' key, got {item!r}")

    mime = str(item["mime"])
    where = f"{codec_name} {mime}"
    color_formats = tuple(_coerce_int(cf, where) for cf in item.get("color_formats") or [])
    profile_levels = tuple(_parse_profile_level(pl, where) for pl in item.get("profile_levels") or [])
    return mime, RawTypeCapabilities(color_formats=color_formats, profile_levels=profile_levels)


def _parse_codec(index: int, item: Any) -> CodecEntry:
    if not isinstance(item, Mapping) or not item.get("name"):
        raise SnapshotError(f"codec #{index}: expected a mapping with a 'name' key")

    name = str(item["name"])
    types_payload = item.get("types") or []
    if not isinstance(types_payload, list):
        raise SnapshotError(f"{name}: 'types' must be a list")

    capabilities: List[RawTypeCapabilities] = []
    supported: List[str] = []
    for type_item in types_payload:
        mime, caps = _parse_type(name, type_item)
        supported.append(mime)
        capabilities.append(caps)

    encoder = item.get("encoder", False)
    if not isinstance(encoder, bool):
        raise SnapshotError(f"{name}: 'encoder' must be true or false, got {encoder!r}")

    descriptor = RawCodecDescriptor(
        name=name,
        is_encoder=encoder,
        supported_types=tuple(supported),
    )
    return CodecEntry(descriptor=descriptor, capabilities=tuple(capabilities))
