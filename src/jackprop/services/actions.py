"""ActionService: list, describe, and run registered actions."""

from __future__ import annotations

import logging
from typing import Any

from jackprop.config.logging import bind_action
from jackprop.domain.errors import ActionValidateError
from jackprop.services._helpers import to_plain
from jackprop.services.base import BaseService
from jackprop.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ActionService(BaseService):
    """Service-layer front for the action registry."""

    def list_actions(self) -> ServiceResult:
        items = [
            {"name": a.name, "description": a.description} for a in self._registry
        ]
        return ServiceResult(
            ok=True,
            op="list_actions",
            data={"count": len(items), "items": items},
            warnings=list(self._registry.warnings),
        )

    def describe(self, name: str) -> ServiceResult:
        op = "describe_action"
        action = self._registry.get(name)
        if action is None:
            return self._unknown(op, name)
        return ServiceResult(ok=True, op=op, data=action.describe())

    def run(
        self,
        name: str,
        jacks: dict[str, Any] | None = None,
        props: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Invoke action *name*, converting its errors into a failed result.

        Error codes:
            UNKNOWN_ACTION: no action registered under *name*.
            VALIDATION_FAILED: jacks/props did not validate; ``detail.errors``
                holds the error tree.
            PERFORM_FAILED: the action's handler raised.

        ``post_perform`` fires for validation and perform failures as well as
        successes; a perform failure reports its message as ``errors``.
        """
        op = "run_action"
        action = self._registry.get(name)
        if action is None:
            return self._unknown(op, name)

        warnings: list[str] = []
        with bind_action(name):
            try:
                result = action(jacks, props)
            except ActionValidateError as exc:
                self._dispatch_event(
                    "post_perform",
                    {"action_name": name, "ok": False, "errors": exc.errors},
                    warnings,
                )
                return ServiceResult.failure(
                    op,
                    "VALIDATION_FAILED",
                    exc.message,
                    detail={"action": name, "errors": exc.errors},
                    warnings=warnings,
                )
            except Exception as exc:
                logger.debug("Action %s raised", name, exc_info=True)
                message = f"{type(exc).__name__}: {exc}"
                self._dispatch_event(
                    "post_perform",
                    {"action_name": name, "ok": False, "errors": message},
                    warnings,
                )
                return ServiceResult.failure(
                    op,
                    "PERFORM_FAILED",
                    message,
                    detail={"action": name},
                    warnings=warnings,
                )

            self._dispatch_event(
                "post_perform", {"action_name": name, "ok": True, "errors": None}, warnings
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"action": name, "result": to_plain(result)},
            warnings=warnings,
        )

    def _unknown(self, op: str, name: str) -> ServiceResult:
        return ServiceResult.failure(
            op,
            "UNKNOWN_ACTION",
            f"No action named {name!r}",
            detail={"name": name, "available": self._registry.names()},
        )
