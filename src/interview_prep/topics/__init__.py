from .catalog import TOPICS, Topic, TopicSection
from .menu import explore_topic, run_menu

__all__ = [
    "TOPICS",
    "Topic",
    "TopicSection",
    "explore_topic",
    "run_menu",
]
