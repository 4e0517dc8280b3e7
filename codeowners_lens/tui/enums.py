from enum import Enum

from codeowners_lens.models import OwnerStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


OWNER_STATUS_STYLE = {
    OwnerStatus.OWNED: UIStyle.GREEN.value,
    OwnerStatus.UNOWNED: UIStyle.YELLOW.value,
    OwnerStatus.NO_RULE_FILE: UIStyle.RED.value,
}
