"""
Declarative table of the eye settings.

Each Setting names its key, kind and constraints plus the default value the
store falls back to. Enum settings are persisted by nick and exposed by index.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from eyeprefs.core.i18n import N_

ENUM = 'enum'
INT = 'int'
BOOL = 'bool'


@dataclass(frozen=True)
class Setting:
    key: str
    kind: str
    default: Any
    title: str = ''
    subtitle: str = ''
    lower: Optional[int] = None
    upper: Optional[int] = None
    step: int = 1
    # (nick, label) pairs, in index order
    options: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def nicks(self) -> List[str]:
        return [nick for nick, _label in self.options]

    @property
    def labels(self) -> List[str]:
        return [label for _nick, label in self.options]

    def accepts(self, value: Any) -> bool:
        """Check a raw stored value (nick for enums) against the constraints."""
        if self.kind == BOOL:
            return isinstance(value, bool)
        if self.kind == INT:
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            return self.lower <= value <= self.upper
        if self.kind == ENUM:
            return value in self.nicks
        return False


EYE_POSITION = Setting(
    'eye-position', ENUM, 'center',
    title=N_('Position'), subtitle=N_('Position of the eye on the panel'),
    options=(('left', N_('Left')), ('center', N_('Center')), ('right', N_('Right'))),
)
EYE_INDEX = Setting(
    'eye-index', INT, 0,
    title=N_('Index'), subtitle=N_('Index of the eye on the panel segment'),
    lower=0, upper=100,
)
EYE_COUNT = Setting(
    'eye-count', INT, 1,
    title=N_('Count'), subtitle=N_('Number of eyes to be spawned'),
    lower=1, upper=100,
)
EYE_WIDTH = Setting(
    'eye-width', INT, 40,
    title=N_('Width'), subtitle=N_('Drawing space and padding of the eye'),
    lower=20, upper=1000,
)
EYE_REACTIVE = Setting(
    'eye-reactive', BOOL, False,
    title=N_('Interactivity'), subtitle=N_('Allow eyes to respond to clicks'),
)
EYE_SHAPE = Setting(
    'eye-shape', ENUM, 'eyelid',
    title=N_('Shape'), subtitle=N_('Shape of the eye'),
    options=(('eyelid', N_('Eyelid')), ('round', N_('Round'))),
)
EYE_LINE_WIDTH = Setting(
    'eye-line-width', INT, 2,
    title=N_('Stroke'), subtitle=N_('Thickness of the strokes'),
    lower=0, upper=50,
)
EYE_REPAINT_INTERVAL = Setting(
    'eye-repaint-interval', INT, 16,
    title=N_('Refresh Interval'),
    subtitle=N_('Milliseconds between redraws of the eye. '
                'Lower is faster, but more CPU intensive.'),
    # 5ms => 200fps, 1000ms => 1fps
    lower=5, upper=1000,
)

PLACEMENT_SETTINGS = (EYE_POSITION, EYE_INDEX, EYE_COUNT, EYE_WIDTH, EYE_REACTIVE)
DRAWING_SETTINGS = (EYE_SHAPE, EYE_LINE_WIDTH, EYE_REPAINT_INTERVAL)

# Page order
EYE_SETTINGS = PLACEMENT_SETTINGS + DRAWING_SETTINGS

SCHEMA: Dict[str, Setting] = {setting.key: setting for setting in EYE_SETTINGS}


def default_settings() -> Dict[str, Any]:
    return {setting.key: setting.default for setting in EYE_SETTINGS}
