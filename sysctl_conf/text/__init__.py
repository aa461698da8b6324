"""Line-level grammar helpers: line classification and key path splitting."""

from .keys import join_key, split_key
from .lines import classify_line

__all__ = ["classify_line", "join_key", "split_key"]
