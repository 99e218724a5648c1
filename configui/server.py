"""
Process supervisor for the Config UI Example service.

The supervisor moves through four phases:

    STARTING -> RUNNING -> DRAINING -> STOPPED

The listener runs in its own task. A shutdown is requested by setting the
supervisor's stop event, which the SIGINT/SIGTERM handlers do. Draining is
bounded by ``SHUTDOWN_TIMEOUT``; overrunning it is fatal.
"""
import asyncio
import contextlib
import signal
from enum import Enum
from typing import Optional, Protocol

import uvicorn
from fastapi import FastAPI

from configui.core.config import Settings, get_settings
from configui.core.logging import logger


EXIT_OK = 0
EXIT_FAILURE = 1

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class Phase(str, Enum):
    """Lifecycle phase of the supervisor."""
    STARTING = "starting"
    RUNNING = "running"
    DRAINING = "draining"
    STOPPED = "stopped"


class Listener(Protocol):
    """The part of ``uvicorn.Server`` the supervisor relies on."""
    should_exit: bool

    async def serve(self) -> None:
        ...


class ListenerServer(uvicorn.Server):
    """
    uvicorn server that leaves signal handling to the supervisor.
    """

    def install_signal_handlers(self) -> None:
        # uvicorn < 0.29
        pass

    @contextlib.contextmanager
    def capture_signals(self):
        # uvicorn >= 0.29
        yield


def build_listener(app: FastAPI, settings: Settings) -> ListenerServer:
    """
    Create the uvicorn listener for ``app`` on ``HOST:PORT``.
    """
    config = uvicorn.Config(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,  # logging is routed through loguru by setup_logging
        access_log=False,
        lifespan="on",
    )
    return ListenerServer(config)


class Supervisor:
    """
    Run a listener until a shutdown is requested, then drain it with a deadline.

    Attributes:
        listener: Server exposing ``serve()`` and ``should_exit``
        shutdown_timeout: Seconds allowed for draining
        phase: Current lifecycle phase
        stop_requested: Cancellation token; setting it starts the drain
    """

    def __init__(self, listener: Listener, shutdown_timeout: float = 5.0):
        self.listener = listener
        self.shutdown_timeout = shutdown_timeout
        self.phase = Phase.STARTING
        self.stop_requested = asyncio.Event()
        self.received_signal: Optional[signal.Signals] = None

    def _enter(self, phase: Phase) -> None:
        logger.debug(f"Supervisor {self.phase.value} -> {phase.value}")
        self.phase = phase

    def request_shutdown(self, sig: Optional[signal.Signals] = None) -> None:
        """Set the cancellation token. Safe to call more than once."""
        if sig is not None and self.received_signal is None:
            self.received_signal = sig
            logger.info(f"Received {sig.name}")
        self.stop_requested.set()

    def install_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        for sig in SHUTDOWN_SIGNALS:
            try:
                loop.add_signal_handler(sig, self.request_shutdown, sig)
            except NotImplementedError:  # pragma: no cover - Windows compatibility
                pass

    def remove_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        for sig in SHUTDOWN_SIGNALS:
            try:
                loop.remove_signal_handler(sig)
            except NotImplementedError:  # pragma: no cover - Windows compatibility
                pass

    async def run(self, handle_signals: bool = True) -> int:
        """
        Serve until shutdown is requested and return the process exit status.
        """
        loop = asyncio.get_running_loop()
        if handle_signals:
            self.install_signal_handlers(loop)

        try:
            return await self._supervise()
        finally:
            if handle_signals:
                self.remove_signal_handlers(loop)
            self._enter(Phase.STOPPED)

    async def _supervise(self) -> int:
        serve_task = asyncio.create_task(self._listen(), name="listener")
        stop_task = asyncio.create_task(self.stop_requested.wait(), name="stop-requested")
        self._enter(Phase.RUNNING)

        await asyncio.wait({serve_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)

        if not self.stop_requested.is_set():
            # The listener ended before anyone asked it to
            stop_task.cancel()
            exc = serve_task.exception()
            if exc is not None:
                logger.opt(exception=exc).error(f"listen error: {exc}")
            else:
                logger.error("listen error: listener stopped unexpectedly")
            return EXIT_FAILURE

        self._enter(Phase.DRAINING)
        logger.info("Shutting down...")
        self.listener.should_exit = True

        try:
            await asyncio.wait_for(serve_task, timeout=self.shutdown_timeout)
        except asyncio.TimeoutError:
            logger.critical(
                f"Server forced to shutdown: in-flight requests did not drain "
                f"within {self.shutdown_timeout:g}s"
            )
            return EXIT_FAILURE
        except Exception as exc:
            logger.opt(exception=exc).critical(f"Server forced to shutdown: {exc}")
            return EXIT_FAILURE

        logger.info("Exiting...")
        return EXIT_OK

    async def _listen(self) -> None:
        try:
            await self.listener.serve()
        except SystemExit as exc:
            # uvicorn exits the process when it cannot bind its socket
            raise RuntimeError(f"listener exited with status {exc.code}") from exc


def run(settings: Optional[Settings] = None, app: Optional[FastAPI] = None) -> int:
    """
    Build the application and listener, supervise them and return the exit status.
    """
    settings = settings or get_settings()
    if app is None:
        from configui.main import create_app

        app = create_app(settings)

    logger.info(f"Starting listener on http://{settings.HOST}:{settings.PORT}")
    supervisor = Supervisor(build_listener(app, settings), shutdown_timeout=settings.SHUTDOWN_TIMEOUT)
    return asyncio.run(supervisor.run())
