from mocking_api.shared.logger.structured_logger import StructuredLogger, add_caller_stack

__all__ = ["StructuredLogger", "add_caller_stack"]
