"""Bot account policy shared by the bot detector and the content filter."""

from collections.abc import Iterable

from contribution_scoring.domain.scoring_constants import BOT_NAME_SUFFIX


class BotPolicy:
    """Decide whether a username belongs to an automation account.

    A name is a bot when it ends with ``[bot]``, contains one of the
    configured markers (case-insensitive), or the platform flagged the
    account. The allow list overrides every check.
    """

    def __init__(
        self,
        name_markers: Iterable[str] = (),
        allow_list: Iterable[str] = (),
    ) -> None:
        """Initialize bot policy.

        Args:
            name_markers: Substrings identifying automation accounts
            allow_list: Usernames never treated as bots
        """
        self.name_markers = tuple(m.lower() for m in name_markers if m)
        self.allow_list = frozenset(name.lower() for name in allow_list)

    def is_allow_listed(self, username: str) -> bool:
        return username.lower() in self.allow_list

    def matches_name(self, username: str) -> bool:
        """Check the name-based heuristics only.

        Example:
            >>> BotPolicy(["renovate"]).matches_name("Renovate-Helper")
            True
            >>> BotPolicy().matches_name("octocat")
            False
        """
        if username.endswith(BOT_NAME_SUFFIX):
            return True
        lowered = username.lower()
        return any(marker in lowered for marker in self.name_markers)

    def is_bot(self, username: str, *, platform_flag: bool = False) -> bool:
        """Classify ``username``; ``platform_flag`` is the payload's own bot marker."""
        if self.is_allow_listed(username):
            return False
        return self.matches_name(username) or platform_flag
