from aws_lambda_powertools import Logger

from channels.base import BaseChannel


logger = Logger(child=True)


class Notifier:
    """Posts replies and announcements to every enabled channel. Never raises."""

    def __init__(self, channels: list[BaseChannel], max_retries: int = 2):
        self._channels = {ch.name: ch for ch in channels}
        self._max_retries = max_retries

    def get_target_channels(self) -> list[BaseChannel]:
        return [ch for ch in self._channels.values() if ch.is_enabled()]

    def post(self, text: str, channel_ref: str) -> dict[str, bool]:
        target_channels = self.get_target_channels()

        if not target_channels:
            logger.warning("No channels enabled, message dropped", extra={"channel_ref": channel_ref})
            return {}

        results = {ch.name: self._post_with_retry(ch, text, channel_ref) for ch in target_channels}

        failed = [name for name, success in results.items() if not success]
        if failed:
            logger.error("Failed to post to channels", extra={"channels": failed, "channel_ref": channel_ref})

        return results

    def _post_with_retry(self, channel: BaseChannel, text: str, channel_ref: str) -> bool:
        for attempt in range(self._max_retries + 1):
            try:
                if channel.post(text, channel_ref):
                    return True
                logger.warning(
                    "Channel returned False",
                    extra={"channel": channel.name, "attempt": attempt + 1, "max_retries": self._max_retries + 1},
                )
            except Exception as e:
                logger.warning(
                    "Channel raised exception",
                    extra={"channel": channel.name, "attempt": attempt + 1, "error": str(e)},
                )

        return False
