from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeviceInfo:
    release: str      # user-facing OS version, e.g. "13"
    sdk_int: int      # device API level
    target_sdk: int   # API level the app targets

    @classmethod
    def from_settings(cls, cfg) -> "DeviceInfo":
        d = cfg.device
        return cls(release=str(d.release), sdk_int=int(d.sdk_int), target_sdk=int(d.target_sdk))
