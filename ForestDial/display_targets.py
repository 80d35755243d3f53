"""Display target abstraction - allows swapping the real page with test backends."""
import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

TIME_TARGET = "time"
DATE_TARGET = "date"
SEASON_TARGET = "season"
WEATHER_TARGET = "weather"


class DisplayTarget(ABC):
    """A UI element owned by the page that the dial writes into."""

    @abstractmethod
    def set_text(self, text: str) -> None:
        """Replace the element's text content."""
        pass

    @abstractmethod
    def set_image_source(self, source: str) -> None:
        """
        Point the element's image at a new source.

        Args:
            source: Image path, e.g. "images/Sun.png"
        """
        pass


class FakeDisplayTarget(DisplayTarget):
    """
    Fake target for testing - keeps the current value and every write in memory.
    """

    def __init__(self):
        self.text: Optional[str] = None
        self.image_source: Optional[str] = None
        self.writes: List[Tuple[str, str]] = []

    def set_text(self, text: str) -> None:
        self.text = text
        self.writes.append(("text", text))

    def set_image_source(self, source: str) -> None:
        self.image_source = source
        self.writes.append(("image", source))


class LoggingDisplayTarget(DisplayTarget):
    """Target that only logs what would be displayed."""

    def __init__(self, name: str):
        self.name = name

    def set_text(self, text: str) -> None:
        logging.info(f"[{self.name}] text = {text!r}")

    def set_image_source(self, source: str) -> None:
        logging.info(f"[{self.name}] image = {source}")


class StateFile:
    """
    JSON file holding the latest value written to each target.

    The page reads this file to update its elements; it is rewritten in full
    (via a temporary file and rename) on every change so readers never see a
    partial document.
    """

    def __init__(self, path: str):
        self.path = path
        self._state: Dict[str, Dict[str, str]] = {}

    @property
    def state(self) -> Dict[str, Dict[str, str]]:
        return {name: dict(values) for name, values in self._state.items()}

    def write(self, name: str, kind: str, value: str) -> None:
        entry = self._state.setdefault(name, {})
        if entry.get(kind) == value:
            return
        entry[kind] = value
        self._flush()

    def _flush(self) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(self._state, f, indent=2, sort_keys=True)
        os.replace(tmp_path, self.path)
        logging.debug(f"State file updated: {self.path}")

    def target(self, name: str) -> "StateFileTarget":
        return StateFileTarget(self, name)


class StateFileTarget(DisplayTarget):
    """Target backed by one entry of a shared StateFile."""

    def __init__(self, state_file: StateFile, name: str):
        self.state_file = state_file
        self.name = name

    def set_text(self, text: str) -> None:
        self.state_file.write(self.name, "text", text)

    def set_image_source(self, source: str) -> None:
        self.state_file.write(self.name, "image", source)


class DisplayTargets:
    """
    Mapping from symbolic target name to target handle.

    Page variants may omit some targets, so writing to an unknown name is a
    silent no-op.
    """

    def __init__(self, targets: Optional[Dict[str, DisplayTarget]] = None):
        self._targets: Dict[str, DisplayTarget] = dict(targets or {})

    def register(self, name: str, target: DisplayTarget) -> None:
        self._targets[name] = target

    def get(self, name: str) -> Optional[DisplayTarget]:
        return self._targets.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._targets

    def set_text(self, name: str, text: str) -> bool:
        """Write text to a named target. Returns False if the target is absent."""
        target = self._targets.get(name)
        if target is None:
            logging.debug(f"No '{name}' target on this page, skipping text update")
            return False
        target.set_text(text)
        return True

    def set_image_source(self, name: str, source: str) -> bool:
        """Write an image source to a named target. Returns False if the target is absent."""
        target = self._targets.get(name)
        if target is None:
            logging.debug(f"No '{name}' target on this page, skipping image update")
            return False
        target.set_image_source(source)
        return True
