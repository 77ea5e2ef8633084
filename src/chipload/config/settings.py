"""Application preferences (persisted to disk)."""

from __future__ import annotations

import json
import warnings
from dataclasses import dataclass, asdict
from pathlib import Path

from .defaults import BUNDLED_TABLE, DEFAULT_OUT_UNIT, REPORT_FILE_NAME
from .machine_profiles import MachineModel, MachineProfile, get_profile


@dataclass
class AppSettings:
    """User preferences, serialized to ~/.chipload/settings.json.

    An empty ``table_path`` selects the chipload table bundled with the
    package.
    """

    default_machine: str = MachineModel.ROUTER.value
    default_out_unit: str = DEFAULT_OUT_UNIT
    table_path: str = ""
    report_path: str = REPORT_FILE_NAME

    @property
    def table(self) -> Path:
        if self.table_path:
            return Path(self.table_path).expanduser()
        return BUNDLED_TABLE

    @property
    def machine(self) -> MachineProfile:
        """Profile named by ``default_machine``; the router if it is unknown."""
        try:
            return get_profile(self.default_machine)
        except ValueError:
            warnings.warn(
                f"Unknown machine {self.default_machine!r} in settings, "
                f"using {MachineModel.ROUTER.value}",
                UserWarning,
                stacklevel=2,
            )
            return get_profile(MachineModel.ROUTER)

    @staticmethod
    def _path() -> Path:
        return Path.home() / ".chipload" / "settings.json"

    def save(self) -> None:
        p = self._path()
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(asdict(self), indent=2))

    @classmethod
    def load(cls) -> "AppSettings":
        p = cls._path()
        if p.exists():
            data = json.loads(p.read_text())
            return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
        return cls()
