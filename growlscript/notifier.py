"""Growl notifications driven by generated AppleScript."""

from __future__ import annotations

import logging

from growlscript.errors import GrowlRuntimeError
from growlscript.runner import (
    APPLESCRIPT_ENGINE,
    OsascriptEngineProvider,
    ScriptEngineProvider,
    ScriptRunner,
)
from growlscript.script_builder import ScriptBuilder, script

GROWL_BUNDLE_ID = "com.Growl.GrowlHelperApp"
logger = logging.getLogger(__name__)


class GrowlNotifier:
    """Register an application with Growl and post notifications to it.

    ``initialize`` must succeed before any other method is called. After that,
    every method is best effort: script failures are logged and never raised.
    The notification lists are kept by reference, and ``enabled_notifications``
    is not checked against ``available_notifications``.
    """

    def __init__(
        self,
        application_name: str,
        available_notifications: list[str],
        enabled_notifications: list[str],
        *,
        engine_provider: ScriptEngineProvider | None = None,
        growl_bundle_id: str = GROWL_BUNDLE_ID,
    ) -> None:
        self.application_name = application_name
        self.available_notifications = available_notifications
        self.enabled_notifications = enabled_notifications
        self.growl_bundle_id = growl_bundle_id
        self._engine_provider = engine_provider or OsascriptEngineProvider()
        self._runner: ScriptRunner | None = None

    def initialize(self) -> bool:
        """Acquire the AppleScript engine and check that Growl is running."""
        engine = self._engine_provider.get_engine(APPLESCRIPT_ENGINE)
        if engine is None:
            logger.error("No AppleScript engine available.")
            return False
        self._runner = ScriptRunner(engine)
        if not self.is_growl_enabled():
            logger.error("No Growl process was found.")
            self._runner = None
            return False
        return True

    def is_growl_enabled(self) -> bool:
        """Return True when at least one Growl helper process is running."""
        text = (
            script()
            .append("tell application ")
            .append_quoted("System Events")
            .newline("count of (every process whose bundle identifier is ")
            .append_quoted(self.growl_bundle_id)
            .append(")")
            .newline("end tell")
            .build()
        )
        count = self._require_runner().evaluate_as(text, 0)
        return count > 0

    def register_application(self) -> None:
        """Register the application and its notification names with Growl."""
        text = (
            self._tell_growl(script())
            .newline("set the allNotificationsList to ")
            .append_array(self.available_notifications)
            .newline("set the enabledNotificationsList to ")
            .append_array(self.enabled_notifications)
            .newline("register as application ")
            .append_quoted(self.application_name)
            .append(
                " all notifications allNotificationsList"
                " default notifications enabledNotificationsList"
            )
            .newline("end tell")
            .build()
        )
        logger.info("Registering %s with Growl.", self.application_name)
        self._require_runner().evaluate(text)

    def notify(self, notification_name: str, title: str, message: str) -> None:
        """Post a notification without an icon."""
        builder = self._tell_growl(script())
        text = (
            self._notify_line(builder, notification_name, title, message)
            .newline("end tell")
            .build()
        )
        self._require_runner().evaluate(text)

    def notify_with_icon(
        self, notification_name: str, title: str, message: str, icon_path: str
    ) -> None:
        """Post a notification using the image at ``icon_path`` as its icon.

        The image is read by the script itself, so a missing or unreadable
        file shows up as a logged script failure.
        """
        builder = script().append(_raw_image_command(icon_path)).newline("")
        builder = self._tell_growl(builder)
        text = (
            self._notify_line(builder, notification_name, title, message)
            .append(" image rawImage")
            .newline("end tell")
            .build()
        )
        self._require_runner().evaluate(text)

    def _tell_growl(self, builder: ScriptBuilder) -> ScriptBuilder:
        return builder.append("tell application id ").append_quoted(self.growl_bundle_id)

    def _notify_line(
        self, builder: ScriptBuilder, notification_name: str, title: str, message: str
    ) -> ScriptBuilder:
        return (
            builder.newline("notify with name ")
            .append_quoted(notification_name)
            .append(" title ")
            .append_quoted(title)
            .append(" description ")
            .append_quoted(message)
            .append(" application name ")
            .append_quoted(self.application_name)
        )

    def _require_runner(self) -> ScriptRunner:
        if self._runner is None:
            raise GrowlRuntimeError("Notifier is not initialized.")
        return self._runner


def _raw_image_command(image_path: str) -> str:
    """Return script lines that load an image file as raw TIFF data."""
    return (
        script()
        .append("set imgfd to open for access POSIX file ")
        .append_quoted(image_path)
        .newline("set img to read imgfd as ")
        .append_quoted("TIFF")
        .newline("close access imgfd")
        .newline("set rawImage to img")
        .build()
    )


__all__ = ["GROWL_BUNDLE_ID", "GrowlNotifier"]
