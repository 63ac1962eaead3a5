"""Open API command.

CLI: cargo-nav <crate> [crate|homepage|documentation|repository]
"""

import logging
from collections.abc import Iterator

from ..browser.BrowserLauncher import BrowserLauncher
from ..browser.DispatchError import DispatchError
from ..browser.WebBrowserLauncher import WebBrowserLauncher
from ..config.NavConfig import NavConfig
from ..StageResult import StageResult
from .Destination import Destination
from .fetch_crate_info import fetch_crate_info
from .FetchError import FetchError
from .format_summary import format_summary
from .MissingLinkError import MissingLinkError
from .OpenOutput import OpenOutput
from .resolve_link import resolve_link

logger = logging.getLogger(__name__)


def cmd_open(
    crate_name: str,
    destination: Destination = Destination.CRATE,
    config: NavConfig | None = None,
    launcher: BrowserLauncher | None = None,
    dispatch: bool = True,
) -> StageResult:
    """Fetch a crate, resolve one of its links and open it in the browser.

    Args:
        crate_name: Crate to look up.
        destination: Which link to open.
        config: Registry settings; loaded from file and environment when None.
        launcher: Browser launcher; the system browser when None.
        dispatch: When False, stop after resolving and leave the URL in the output.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        output = OpenOutput(crate=crate_name, destination=destination.value)

        def finish(message: str, success: bool) -> None:
            result_obj.result = message
            result_obj.output = output.model_dump(mode="python")
            result_obj.success = success

        yield (0.1, "Loading configuration...")
        try:
            nav_config = config if config is not None else NavConfig.load()
        except ValueError as e:
            output.errors.append(str(e))
            finish(f"Configuration error: {e}", False)
            return

        yield (0.2, f"Fetching crate information from {nav_config.api_url}...")
        try:
            info = fetch_crate_info(crate_name, api_url=nav_config.api_url, timeout=nav_config.timeout)
        except FetchError as e:
            logger.debug("%s", e)
            output.errors.append(str(e))
            finish(f"Could not find crate information for '{crate_name}'.", False)
            return
        logger.debug("API info: %r", info)

        yield (0.6, f"Resolving {destination.label} link...")
        output.summary = format_summary(info, site_url=nav_config.site_url)
        try:
            output.url = resolve_link(info, destination, site_url=nav_config.site_url)
        except MissingLinkError as e:
            output.errors.append(str(e))
            finish(str(e), False)
            return

        if dispatch:
            yield (0.8, f"Opening {output.url}...")
            browser = launcher if launcher is not None else WebBrowserLauncher()
            try:
                browser.launch(output.url)
            except DispatchError as e:
                logger.debug("Browser launch failed for %s: %s", e.url, e.reason)
                output.errors.append(f"{e} {e.reason}".strip())
                finish(str(e), False)
                return
            output.dispatched = True

        yield (1.0, "Complete")
        finish(output.url, True)

    return StageResult(
        announce=f"Looking up {destination.label} link for {crate_name}...",
        progress_callback=do_work,
    )
