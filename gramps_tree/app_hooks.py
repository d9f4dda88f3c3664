from typing import Optional, Protocol


class AppHooks(Protocol):
    """
    Protocol for application hooks to follow conversion progress.
    This can be implemented by the host application (a GUI progress bar,
    a CLI spinner) to observe a tree conversion.

    Methods:
        report_step(info, target, reset_counter, plus_step) -> None:
            Report progress of the current conversion phase.
    """
    def report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 1) -> None:
        """
        Report progress messages from the conversion process.

        Args:
            info (str): Progress message.
            target (int): Number of records in the current phase.
            reset_counter (bool): Whether to restart the counter for a new phase.
            plus_step (int): Number of records processed since the last report.
        """
        pass
