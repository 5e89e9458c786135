from asciimoji.tui.app import LookupApp, ToastNotifier

__all__ = ["LookupApp", "ToastNotifier"]
