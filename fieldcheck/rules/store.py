"""Constraint store.

Holds the constraint map (type name -> field name -> validator name ->
constraint parameters) and keeps it current: merges from callers, from
local files and from a one-shot remote load, broadcasting the revalidate
signal after each successful change.
"""

from __future__ import annotations

import asyncio
import copy
from pathlib import Path
from typing import Any, Mapping

import requests
import yaml

from fieldcheck.events import Signal
from fieldcheck.rules.client import RulesClient
from fieldcheck.utils.logging import get_logger

logger = get_logger(__name__)

ConstraintMap = dict[str, dict[str, dict[str, dict[str, Any]]]]


class ConstraintStore:
    """Live constraint map with merge, load and change notification.

    Merges are type by type: a field present in an update replaces that
    field's whole validator set, everything else is kept.
    """

    def __init__(self, signal: Signal | None = None, client: RulesClient | None = None):
        self.signal = signal or Signal()
        self._client = client
        self._constraints: ConstraintMap = {}
        self.loading = False

    @property
    def client(self) -> RulesClient:
        if self._client is None:
            self._client = RulesClient()
        return self._client

    def close(self) -> None:
        """Release the HTTP session, if one was opened."""
        if self._client is not None:
            self._client.close()

    def _merge(self, partial: Mapping[str, Any]) -> None:
        if not isinstance(partial, Mapping):
            raise TypeError(
                f"Constraints must be a mapping of type names, got {type(partial).__name__}"
            )
        for type_name, fields in partial.items():
            if not isinstance(fields, Mapping):
                raise TypeError(
                    f"Constraints for type '{type_name}' must be a mapping of field names"
                )
            for field_name, validators in fields.items():
                if not isinstance(validators, Mapping):
                    raise TypeError(
                        f"Constraints for '{type_name}.{field_name}' must be a mapping "
                        "of validator names"
                    )
                for validator_name, params in validators.items():
                    if params is not None and not isinstance(params, Mapping):
                        raise TypeError(
                            f"Parameters of '{validator_name}' on '{type_name}.{field_name}' "
                            "must be a mapping"
                        )

        # build the merged map first so callers never observe a partial merge
        merged = dict(self._constraints)
        for type_name, fields in copy.deepcopy(dict(partial)).items():
            type_constraints = dict(merged.get(type_name, {}))
            type_constraints.update(fields)
            merged[type_name] = type_constraints
        self._constraints = merged

    def add_constraints(self, partial: Mapping[str, Any]) -> None:
        """Merge ``partial`` into the store and broadcast the revalidate signal."""
        self._merge(partial)
        logger.debug("Constraints merged", types=",".join(partial))
        self.signal.broadcast()

    def get_constraints(self) -> ConstraintMap:
        """Return the live constraint map. Callers must not mutate it."""
        return self._constraints

    def constraints_for(self, type_name: str) -> dict[str, dict[str, Any]] | None:
        return self._constraints.get(type_name)

    def has_type(self, type_name: str) -> bool:
        return type_name in self._constraints

    def load_from_file(self, path: str | Path) -> None:
        """Merge a constraint map stored as JSON or YAML.

        Raises:
            OSError: If the file cannot be read
            yaml.YAMLError: If the document cannot be parsed
            TypeError: If the document is not a mapping
        """
        with Path(path).open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        logger.debug("Loaded constraints file", path=str(path))
        self.add_constraints(data if data is not None else {})

    async def load_from_source(self, url: str | None = None) -> bool:
        """Fetch a constraint map once and merge it.

        While the request is outstanding ``loading`` is True and reads see
        the previously loaded constraints. Failures leave the store as it
        was: nothing is merged, nothing is broadcast and nothing is raised.

        Returns:
            True if constraints were merged
        """
        self.loading = True
        try:
            data = await asyncio.to_thread(self.client.fetch, url)
            self._merge(data)
        except (requests.RequestException, ValueError, TypeError) as e:
            logger.warning("Failed to load constraints", url=url or "<configured>", error=str(e))
            return False
        finally:
            self.loading = False

        logger.info("Constraints loaded", url=url or "<configured>", types=len(data))
        self.signal.broadcast()
        return True
