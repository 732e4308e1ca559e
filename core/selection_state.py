"""
WaterView — Selection State

The one piece of mutable UI state: which site and which parameter are
currently on screen. Two actors write to it (the site selector and map
marker clicks) through the same `set_site` path, so views never need to
know where a change came from.

Views observe the state by subscribing a listener; listeners run
synchronously, in subscription order, after every effective change.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional

from core.exceptions import InvalidSelectionError, SelectionNotReadyError

logger = logging.getLogger("waterview")

SITE = "site"
PARAMETER = "parameter"


class SelectionStatus(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


@dataclass(frozen=True)
class Selection:
    selected_site: str
    selected_parameter: Optional[str] = None


Listener = Callable[[str, Selection], None]


class SelectionState:
    """
    Current site/parameter selection with change notification.

    Parameters
    ----------
    site_names : iterable of str, optional
        Known sites in load order. The first becomes the initial selection.
    parameters : iterable of str, optional
        Known parameter names.

    If both are given the state starts ``READY``; otherwise call
    `initialize` once the data is loaded.
    """

    def __init__(self, site_names: Optional[Iterable[str]] = None,
                 parameters: Optional[Iterable[str]] = None):
        self._sites: List[str] = []
        self._parameters: List[str] = []
        self._selection: Optional[Selection] = None
        self._listeners: List[Listener] = []
        if site_names is not None:
            self.initialize(site_names, parameters or [])

    # -----------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------
    def initialize(self, site_names: Iterable[str], parameters: Iterable[str]) -> None:
        sites = list(site_names)
        if not sites:
            raise ValueError("Selection needs at least one known site")
        self._sites = sites
        self._parameters = list(parameters)
        self._selection = Selection(selected_site=sites[0])
        logger.debug("Selection initialized to %s", sites[0])

    @property
    def status(self) -> SelectionStatus:
        if self._selection is None:
            return SelectionStatus.UNINITIALIZED
        return SelectionStatus.READY

    @property
    def selection(self) -> Selection:
        self._require_ready()
        return self._selection

    @property
    def site_names(self) -> List[str]:
        return list(self._sites)

    @property
    def parameters(self) -> List[str]:
        return list(self._parameters)

    # -----------------------------------------------------------------
    # Observers
    # -----------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Listener:
        if listener not in self._listeners:
            self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # -----------------------------------------------------------------
    # Updates
    # -----------------------------------------------------------------
    def set_site(self, name: str) -> bool:
        """
        Select a site. Returns True if the selection changed.

        Raises
        ------
        InvalidSelectionError
            ``name`` is not a known site. The selection is left unchanged.
        """
        self._require_ready()
        if name not in self._sites:
            raise InvalidSelectionError(SITE, name)
        if name == self._selection.selected_site:
            return False
        self._selection = Selection(name, self._selection.selected_parameter)
        self._notify(SITE)
        return True

    def set_parameter(self, name: str) -> bool:
        """Select a parameter. Same contract as `set_site`."""
        self._require_ready()
        if name not in self._parameters:
            raise InvalidSelectionError(PARAMETER, name)
        if name == self._selection.selected_parameter:
            return False
        self._selection = Selection(self._selection.selected_site, name)
        self._notify(PARAMETER)
        return True

    def _notify(self, field: str) -> None:
        logger.info("Selection changed (%s): %s / %s", field,
                    self._selection.selected_site, self._selection.selected_parameter)
        for listener in list(self._listeners):
            listener(field, self._selection)

    def _require_ready(self) -> None:
        if self._selection is None:
            raise SelectionNotReadyError()
