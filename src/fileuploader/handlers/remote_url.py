"""Handler to download a file from a URL typed by the user."""

import logging
import os
import tempfile
from typing import Awaitable, Callable, List, Optional
from urllib.parse import urlparse

import httpx

from ..config import get_settings
from ..core.exceptions import HandlerActionError
from ..core.protocols import FileUploaderHandler, SupportsAllMimetypes
from ..core.value_objects import ActionResult, HandlerData
from ..utils import get_mimetype_group

# Asks the user for a URL, None if cancelled.
UrlPrompt = Callable[[], Awaitable[Optional[str]]]


class RemoteUrlHandler(SupportsAllMimetypes, FileUploaderHandler):
    """
    Remote URL handler.

    Configuration:
    - url_prompt: async callable returning the URL to download (required to be enabled)
    - transport: optional httpx transport, mainly for tests
    - timeout_seconds / verify_ssl: default to the FILEUPLOADER_REMOTE_* settings
    """

    name = "CoreFileUploaderRemoteUrl"
    priority = 1000

    def __init__(
        self,
        url_prompt: Optional[UrlPrompt] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout_seconds: Optional[float] = None,
        verify_ssl: Optional[bool] = None,
    ):
        settings = get_settings()
        self.url_prompt = url_prompt
        self.transport = transport
        self.timeout_seconds = settings.remote_download_timeout if timeout_seconds is None else timeout_seconds
        self.verify_ssl = settings.remote_verify_ssl if verify_ssl is None else verify_ssl
        self._logger = logging.getLogger(__name__)

    def is_enabled(self) -> bool:
        return self.url_prompt is not None

    def get_data(self) -> HandlerData:
        return HandlerData(
            title="core.fileuploader.remoteurl",
            icon="link",
            css_class="core-fileuploader-remoteurl-handler",
            action=self.action,
        )

    async def action(
        self,
        max_size: Optional[int] = None,
        upload: Optional[bool] = None,
        allow_offline: Optional[bool] = None,
        mimetypes: Optional[List[str]] = None,
    ) -> ActionResult:
        """Ask for a URL and download it to a temporary file."""
        if self.url_prompt is None:
            raise HandlerActionError("No URL prompt configured", handler_name=self.name)

        url = await self.url_prompt()
        if not url:
            raise HandlerActionError("Cancelled by the user", handler_name=self.name, cancelled=True)

        if max_size is None:
            max_size = get_settings().default_max_size

        path = await self.download(url, max_size=max_size, mimetypes=mimetypes)
        return ActionResult.from_path(path, delete=True)

    async def download(
        self,
        url: str,
        max_size: int = -1,
        mimetypes: Optional[List[str]] = None,
    ) -> str:
        """
        Download a URL into a temporary file.

        Args:
            url: HTTP or HTTPS URL
            max_size: Max size in bytes, -1 for no limit
            mimetypes: Accepted mimetypes, None to accept any

        Returns:
            Path of the downloaded file

        Raises:
            HandlerActionError: Invalid URL, HTTP error, rejected type or size
        """
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise HandlerActionError(f"Invalid URL: {url}", handler_name=self.name, url=url)

        suffix = os.path.splitext(parsed.path)[1]
        fd, path = tempfile.mkstemp(prefix="fileuploader-", suffix=suffix)

        try:
            with os.fdopen(fd, "wb") as output:
                await self._stream_to(output, url, max_size, mimetypes)
        except BaseException:
            os.unlink(path)
            raise

        self._logger.info(f"Downloaded {url} to {path}")
        return path

    async def _stream_to(self, output, url: str, max_size: int, mimetypes: Optional[List[str]]) -> None:
        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=self.timeout_seconds,
                verify=self.verify_ssl,
                follow_redirects=True,
            ) as client:
                async with client.stream("GET", url) as response:
                    response.raise_for_status()

                    content_type = response.headers.get("content-type", "").split(";")[0].strip()
                    if mimetypes is not None and not self._accepts(content_type, mimetypes):
                        raise HandlerActionError(
                            f"File type '{content_type}' is not allowed",
                            handler_name=self.name,
                            url=url,
                            content_type=content_type,
                        )

                    size = 0
                    async for chunk in response.aiter_bytes():
                        size += len(chunk)
                        if max_size is not None and max_size >= 0 and size > max_size:
                            raise HandlerActionError(
                                f"File exceeds the max size of {max_size} bytes",
                                handler_name=self.name,
                                url=url,
                                max_size=max_size,
                            )
                        output.write(chunk)
        except httpx.HTTPError as e:
            raise HandlerActionError(
                f"Error downloading {url}: {e}",
                handler_name=self.name,
                cause=e,
                url=url,
            ) from e

    @staticmethod
    def _accepts(content_type: str, mimetypes: List[str]) -> bool:
        if not content_type:
            return False

        group = get_mimetype_group(content_type)
        for mimetype in mimetypes:
            mimetype = mimetype.lower()
            if mimetype in (content_type.lower(), "*/*") or mimetype == f"{group}/*":
                return True
        return False
