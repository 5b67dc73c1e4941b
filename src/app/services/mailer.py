from abc import ABC, abstractmethod

from libs.result import Result


class Mailer(ABC):
    """Outbound email capability - application layer"""

    @abstractmethod
    async def send(self, to: str, subject: str, body: str) -> Result[None]:
        """Send a plain-text email. Returns an error result instead of raising."""
        pass
