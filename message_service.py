# message_service.py

import time
from config import MESSAGE_TYPES, MAX_MESSAGES


class MessageService:
    """
    MessageService collects timestamped messages for a scaler fitting run.

    Responsibilities:
      - Maintain a rolling queue of the most recent messages
      - Timestamp messages for context
      - Duplicate messages to stdout
      - Support different message types (info, warning, error, debug)

    Attributes:
      - max_messages (int): Maximum number of messages to keep in the queue
      - messages (list): Queue of (timestamp, type, message) tuples
      - debug (bool): Whether debug messages are printed
    """
    def __init__(self, max_messages=MAX_MESSAGES, debug=False, quiet=False):
        self.max_messages = max_messages
        self.messages = []  # List of (timestamp, type, message)
        self.debug = debug
        self.quiet = quiet

        # Use message types from config
        self.message_types = MESSAGE_TYPES

    def _add_message(self, message_type, message):
        """
        Add a message to the queue with timestamp and type.

        Parameters:
          - message_type (str): Type of message ('info', 'warning', 'error', 'debug')
          - message (str): The message text
        """
        timestamp = time.strftime("%H:%M:%S")

        self.messages.append((timestamp, message_type, message))

        # Trim the list to keep only the most recent messages
        if len(self.messages) > self.max_messages:
            self.messages = self.messages[-self.max_messages:]

    def _print(self, message_type, message):
        if self.quiet:
            return
        prefix = self.message_types[message_type]["prefix"]
        if prefix:
            print(f"{prefix}: {message}")
        else:
            print(message)

    def log_info(self, message):
        """
        Log an informational message.

        Parameters:
          - message (str): The information message to log
        """
        self._add_message("info", message)
        self._print("info", message)

    def log_warning(self, message):
        """
        Log a warning message.

        Parameters:
          - message (str): The warning message to log
        """
        self._add_message("warning", message)
        self._print("warning", message)

    def log_error(self, message):
        """
        Log an error message.

        Parameters:
          - message (str): The error message to log
        """
        self._add_message("error", message)
        self._print("error", message)

    def log_debug(self, message):
        """
        Log a debug message.
        Only recorded and printed when the service was created with debug=True.

        Parameters:
          - message (str): The debug message to log
        """
        if not self.debug:
            return
        self._add_message("debug", message)
        self._print("debug", message)

    def get_messages(self, message_type=None):
        """
        Get all messages in the queue, optionally filtered by type.

        Returns:
          - List of (timestamp, type, message) tuples
        """
        if message_type is None:
            return self.messages
        return [m for m in self.messages if m[1] == message_type]

    def get_formatted_messages(self):
        """
        Get formatted strings for all messages in the queue.

        Returns:
          - List of formatted message strings
        """
        formatted = []

        for timestamp, msg_type, message in self.messages:
            prefix = self.message_types[msg_type]["prefix"]
            if prefix:
                formatted.append(f"[{timestamp}] {prefix}: {message}")
            else:
                formatted.append(f"[{timestamp}] {message}")

        return formatted

    def clear(self):
        """Clear all messages from the queue."""
        self.messages = []
