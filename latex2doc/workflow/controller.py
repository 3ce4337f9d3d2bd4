"""ConversionWorkflow: the presentation-facing conversion controller."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from latex2doc.config.models import UploadConfig
from latex2doc.converter.gateway import ConversionGateway
from latex2doc.converter.models import ConversionOptions, GatewayError, SourceDocument
from latex2doc.workflow import state as transitions
from latex2doc.workflow.state import (
    AppError,
    ErrorCategory,
    WorkflowState,
    category_for_gateway_error,
    make_error,
)
from latex2doc.workflow.uploads import UploadError, load_source_file

logger = logging.getLogger(__name__)

StateListener = Callable[[WorkflowState], None]


class ConversionWorkflow:
    """Drives one session: idle → loading → success/error.

    Owns the current WorkflowState and replaces it through the pure
    transitions in ``latex2doc.workflow.state``. Only one conversion runs
    at a time; a request made while loading is rejected and leaves the
    state untouched. Editing the source while loading does not cancel the
    call, its outcome is discarded when it arrives.
    """

    def __init__(
        self,
        gateway: ConversionGateway,
        options: ConversionOptions | None = None,
        upload_config: UploadConfig | None = None,
    ) -> None:
        self.gateway = gateway
        self.upload_config = upload_config or UploadConfig()
        self._state = WorkflowState(options=options or ConversionOptions())
        self._listeners: list[StateListener] = []

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def latex_content(self) -> str:
        return self._state.source.content

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def docx_html(self) -> str | None:
        return self._state.result

    @property
    def error(self) -> AppError | None:
        return self._state.error

    @property
    def conversion_options(self) -> ConversionOptions:
        return self._state.options

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with every new state. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, new_state: WorkflowState) -> WorkflowState:
        old_phase = self._state.phase
        self._state = new_state
        if new_state.phase != old_phase:
            logger.debug("phase %s -> %s", old_phase.value, new_state.phase.value)
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception:
                logger.exception("state listener %r failed", listener)
        return new_state

    # ------------------------------------------------------------------
    # Presentation-layer events
    # ------------------------------------------------------------------

    def on_source_changed(self, text: str) -> WorkflowState:
        source = SourceDocument(content=text, file_name=self._state.source.file_name)
        return self._set_state(transitions.source_replaced(self._state, source))

    def on_option_changed(self, key: str, value: bool) -> WorkflowState:
        return self._set_state(transitions.options_changed(self._state, key, value))

    async def on_file_selected(self, path: str | Path) -> WorkflowState:
        try:
            source = await load_source_file(path, self.upload_config)
        except UploadError as e:
            logger.warning("upload rejected: %s", e)
            if self._state.is_loading:
                return self._state
            return self._set_state(transitions.error_raised(self._state, e.error))
        return self._set_state(transitions.source_replaced(self._state, source))

    async def on_convert_requested(self) -> WorkflowState:
        if self._state.is_loading:
            logger.warning("conversion already in progress; request ignored")
            return self._state

        if self._state.source.is_blank:
            return self._set_state(
                transitions.error_raised(
                    self._state, make_error(ErrorCategory.INPUT_REQUIRED)
                )
            )

        started = self._set_state(transitions.conversion_started(self._state))
        try:
            html = await self.gateway.convert(started.source.content, started.options)
        except GatewayError as e:
            logger.warning("conversion failed (%s): %s", e.kind.value, e.detail)
            error = make_error(category_for_gateway_error(e.kind))
            return self._set_state(transitions.conversion_failed(self._state, error))
        except Exception:
            logger.exception("unexpected error during conversion")
            error = make_error(ErrorCategory.UNKNOWN)
            return self._set_state(transitions.conversion_failed(self._state, error))

        if self._state.pending_revision != self._state.revision:
            logger.debug("source changed during conversion; discarding result")
        return self._set_state(transitions.conversion_succeeded(self._state, html))
