"""
Questions module - ladder building and helps.
"""
from questions.helps import (
    HelpKind,
    HelpGenerator,
    AudienceHelp,
    FiftyFiftyHelp,
    FriendCallHelp,
    apply_help,
    load_help,
)
from questions.ladder import build_ladder, shuffle_question_options
from questions.repository import QuestionRepository, SqlQuestionRepository

__all__ = [
    "HelpKind",
    "HelpGenerator",
    "AudienceHelp",
    "FiftyFiftyHelp",
    "FriendCallHelp",
    "apply_help",
    "load_help",
    "build_ladder",
    "shuffle_question_options",
    "QuestionRepository",
    "SqlQuestionRepository",
]
