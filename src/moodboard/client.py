"""HTTP client for the moodboard backend."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import requests

from moodboard.config import DEFAULT_TIMEOUT, Config
from moodboard.errors import ApiError, BackendUnavailable, RequestFailed, ValidationError
from moodboard.model.board import Attachment, Board, Comment

logger = logging.getLogger(__name__)

ANONYMOUS = "Anonymous"


class MoodboardClient:
    """Thin wrapper over the REST API. One call, one request; nothing is retried."""

    def __init__(
        self,
        api_base: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.api_base = api_base.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Config) -> MoodboardClient:
        return cls(config.api_base, timeout=config.timeout)

    def _url(self, *parts: str) -> str:
        return "/".join([self.api_base, "moodboards", *parts])

    def request(self, method: str, url: str, **kwargs) -> Any:
        """Send a request and decode the JSON body.

        Returns None for 204 or an empty body. Raises BackendUnavailable when
        the backend can't be reached, RequestFailed when the request can't be
        sent at all and ApiError for non-2xx or undecodable responses.
        """
        logger.debug("%s %s", method.upper(), url)
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as exc:
            logger.warning("backend unreachable at %s: %s", self.api_base, exc)
            raise BackendUnavailable(self.api_base) from exc
        except requests.RequestException as exc:
            logger.warning("request %s %s failed: %s", method.upper(), url, exc)
            raise RequestFailed(url, str(exc)) from exc

        if not 200 <= resp.status_code < 300:
            message = resp.text or f"HTTP {resp.status_code}: {resp.reason}"
            raise ApiError(resp.status_code, message)
        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("undecodable response from %s: %s", url, exc)
            raise ApiError(resp.status_code, resp.text) from exc

    # --- boards ---

    def list_boards(self) -> list[Board]:
        data = self.request("get", self._url())
        return [Board.from_dict(b) for b in data or []]

    def get_board(self, board_id: str) -> Board:
        return Board.from_dict(self.request("get", self._url(board_id)))

    def create_board(self, payload: dict[str, Any]) -> Board | None:
        data = self.request("post", self._url(), json=payload)
        return Board.from_dict(data) if data else None

    def replace_board(self, board_id: str, payload: dict[str, Any]) -> Board | None:
        data = self.request("put", self._url(board_id), json=payload)
        return Board.from_dict(data) if data else None

    def delete_board(self, board_id: str) -> None:
        self.request("delete", self._url(board_id))

    # --- comments ---

    def list_comments(self, board_id: str) -> list[Comment]:
        data = self.request("get", self._url(board_id, "comments"))
        return [Comment.from_dict(c) for c in data or []]

    def add_comment(self, board_id: str, content: str, author: str = "") -> Comment | None:
        content = content.strip()
        if not content:
            raise ValidationError("Comment content is required.")
        payload = {"content": content, "author": author.strip() or ANONYMOUS}
        data = self.request("post", self._url(board_id, "comments"), json=payload)
        return Comment.from_dict(data) if data else None

    def delete_comment(self, board_id: str, comment_id: str) -> None:
        self.request("delete", self._url(board_id, "comments", comment_id))

    # --- attachments ---

    def list_attachments(self, board_id: str) -> list[Attachment]:
        data = self.request("get", self._url(board_id, "attachments"))
        return [Attachment.from_dict(a) for a in data or []]

    def upload_attachment(self, board_id: str, path: str | Path) -> Attachment | None:
        if not str(path).strip():
            raise ValidationError("Choose a file to upload.")
        path = Path(path).expanduser()
        if not path.is_file():
            raise ValidationError(f"No such file: {path}")
        with path.open("rb") as fh:
            data = self.request("post", self._url(board_id, "attachments"), files={"file": (path.name, fh)})
        return Attachment.from_dict(data) if data else None

    def delete_attachment(self, board_id: str, attachment_id: str) -> None:
        self.request("delete", self._url(board_id, "attachments", attachment_id))
