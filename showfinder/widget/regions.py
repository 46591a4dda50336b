from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DisplayRegion:
    # replaced wholesale on each render
    entries: list = field(default_factory=list)
    visible: bool = True

    def clear(self):
        self.entries.clear()

    def append(self, entry):
        self.entries.append(entry)

    def show(self):
        self.visible = True

    def hide(self):
        self.visible = False


@dataclass(frozen=True)
class ShowCard:
    show_id: int
    name: str
    summary: Optional[str]
    image: str

    # the Episodes control posts here, so it always carries its own show id
    @property
    def episodes_url(self) -> str:
        return f"/shows/{self.show_id}/episodes"


@dataclass
class WidgetContext:
    # everything the page shows, built once at startup and owned by the controller
    shows: DisplayRegion = field(default_factory=DisplayRegion)
    episodes: DisplayRegion = field(default_factory=lambda: DisplayRegion(visible=False))
    message: Optional[str] = None

