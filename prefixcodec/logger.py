"""
logger.py

Logging module for prefixcodec.


"""


from datetime import datetime
from typing import Union, Optional

from .settings import MERGE_STEP_INTERVAL, CODING_STEP_INTERVAL


class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class FrequencyLog(Log):
    def __init__(self, distinct: int, total: int) -> None:
        self.distinct = distinct
        self.total = total
        super().__init__("Frequency_log", LogLevel.INFO, f"Distinct characters: {distinct}, Total characters: {total}")


class TreeConstructionLog(Log):
    def __init__(self, leaf_count: int, depth: int) -> None:
        self.leaf_count = leaf_count
        self.depth = depth
        super().__init__("Tree_construction_log", LogLevel.INFO, f"Leaves: {leaf_count}, Depth: {depth}")


class CodeAssignedLog(Log):
    def __init__(self, char: str, code: int) -> None:
        self.char = char
        self.code = code
        super().__init__("Code_assigned_log", LogLevel.INFO, f"Character: {char!r}, Code: {code:08b}")


class CodingLog(Log):
    def __init__(self, symbol_size: int, encoded_size: int) -> None:
        self.symbol_size = symbol_size
        self.encoded_size = encoded_size
        super().__init__("Coding_log", LogLevel.INFO, f"Symbol size: {symbol_size}, Encoded size: {encoded_size}")


class MergeProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Merge_progress_step", LogLevel.PROGRESS, message)


class CodingProgressStep(Log):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__("Coding_progress_step", LogLevel.PROGRESS, message)


class Logger:
    def __init__(self) -> None:
        self.merge_progress_count = 0
        self.coding_progress_count = 0

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.merge_step_interval_count = MERGE_STEP_INTERVAL
        self.coding_step_interval_count = CODING_STEP_INTERVAL

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            self._emit(log, self.record_info, self.display_info)
        elif log.level == LogLevel.WARNING:
            self._emit(log, self.record_warning, self.display_warning)
        elif log.level == LogLevel.ERROR:
            self._emit(log, self.record_error, self.display_error)
        elif log.level == LogLevel.PROGRESS:
            if isinstance(log, MergeProgressStep):
                self.merge_progress_count += 1
                count = self.merge_progress_count
                interval = self.merge_step_interval_count
            elif isinstance(log, CodingProgressStep):
                self.coding_progress_count += 1
                count = self.coding_progress_count
                interval = self.coding_step_interval_count
            else:
                raise ValueError(f"Unknown progress step: {log.type_name}")
            if log.total_steps is not None:
                log.message = f"{log.base_message} ({count}/{log.total_steps})"
            else:
                log.message = f"{log.base_message} ({count})"
            self._emit(log, self.record_progress, self.display_progress and count % interval == 0)
        else:
            raise ValueError(f"Unknown log level: {log.level}")

    def _emit(self, log: Log, record: bool, display: bool) -> None:
        if record:
            self.logs.append(log)
        if display:
            print(log)

    def get_logs(self, type_name: Optional[str] = None) -> list:
        if type_name is None:
            return list(self.logs)
        return [log for log in self.logs if log.type_name == type_name]

    def clear_logs(self) -> None:
        self.logs = []
        self.merge_progress_count = 0
        self.coding_progress_count = 0

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                file.write(str(log) + "\n")
