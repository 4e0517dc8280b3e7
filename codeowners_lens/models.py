from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional


class OwnerStatus(str, Enum):
    OWNED = "owned"
    UNOWNED = "unowned"
    NO_RULE_FILE = "no_rule_file"


@dataclass
class OwnerRow:
    path: str
    status: OwnerStatus
    label: str
    owners: list[str]
    line_number: Optional[int] = None
    pattern: Optional[str] = None
    rule_file: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["status"] = self.status.value
        return payload


@dataclass
class RuleRow:
    rule_file: str
    base_dir: str
    line_number: int
    pattern: str
    owners: list[str]
