from guest_list.notifications.notifier import (
    EchoNotifier,
    LoggingNotifier,
    Notifier,
    RecordingNotifier,
    Toast,
    ToastVariant,
)

__all__ = [
    "EchoNotifier",
    "LoggingNotifier",
    "Notifier",
    "RecordingNotifier",
    "Toast",
    "ToastVariant",
]
