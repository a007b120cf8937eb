"""Default request collaborator built on requests"""

import requests  # type: ignore[import-untyped]

from ..config.settings import settings
from ..exceptions import TransportError
from ..logging_config import get_logger
from .constants import YoudaoConstants
from .interfaces import DoneCallback, FailCallback, RequesterInterface

logger = get_logger(__name__)


class RequestsRequester(RequesterInterface):
    """Performs one GET per call; no retries"""

    def __init__(
        self,
        timeout: int | None = None,
        session: requests.Session | None = None,
    ):
        self.timeout = int(
            timeout if timeout is not None else settings.youdao.request_timeout
        )
        self.session = session or requests.Session()
        headers = YoudaoConstants.DEFAULT_HEADERS.copy()
        headers["User-Agent"] = settings.youdao.user_agent
        self.session.headers.update(headers)

    def request(self, url: str, done: DoneCallback, fail: FailCallback) -> None:
        logger.debug(f"GET {url}")
        try:
            r = self.session.get(url, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            logger.debug(f"Request to {url} failed: {e}")
            fail(TransportError(url, str(e)))
            return
        done(r.content)
