"""Terminal message helpers, a rust-project.json builder and worked drill solutions."""

__version__ = "5.2.1"