"""Provider producing Slack message attachments instead of plain text."""

from slackistrano.messaging.base import Base


class SlackAttachments(Base):
    """
    Colored attachments with Environment / Branch / Deployer fields.

    ``updating`` keeps the plain-text message; the other events carry one
    attachment each.
    """

    def payload_for_reverting(self) -> dict:
        return self._attachment(
            "warning",
            f"Rollback of {self.application} to {self.stage()} started",
        )

    def payload_for_updated(self) -> dict:
        return self._attachment(
            "good",
            f"Deployed {self.application} to {self.stage()}",
            elapsed=True,
        )

    def payload_for_reverted(self) -> dict:
        return self._attachment(
            "good",
            f"Rolled back {self.application} on {self.stage()}",
            elapsed=True,
        )

    def payload_for_failed(self) -> dict:
        action = "Deploy" if self.deploying else "Rollback"
        return self._attachment(
            "danger",
            f"{action} of {self.application} to {self.stage()} failed",
        )

    def _fields(self, elapsed: bool) -> list[dict]:
        fields = [
            {"title": "Environment", "value": self.stage(), "short": True},
            {"title": "Branch", "value": self.branch, "short": True},
            {"title": "Deployer", "value": self.deployer, "short": True},
        ]
        time_taken = self.elapsed_time if elapsed else None
        if time_taken:
            fields.append({"title": "Time", "value": time_taken, "short": True})
        return fields

    def _attachment(self, color: str, text: str, elapsed: bool = False) -> dict:
        return {
            "attachments": [
                {
                    "color": color,
                    "title": f"{self.application} deployment",
                    "text": text,
                    "fields": self._fields(elapsed),
                    "fallback": text,
                    "mrkdwn_in": ["text"],
                }
            ]
        }
