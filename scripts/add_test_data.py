#!/usr/bin/env python
"""
Script to add test data to database.
Creates one question per ladder level and a demo user, enough to play a game.
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from database.session import db_session
from database.models import Question
from database.queries import QuestionQueries, UserQueries
from game.prizes import LEVEL_COUNT
from utils.logging import setup_logging, get_logger

setup_logging()
logger = get_logger(__name__)

QUESTIONS_DATA = [
    {'level': 0, 'question_text': 'How many legs does a spider have?',
     'option_a': '6', 'option_b': '8', 'option_c': '10', 'option_d': '12', 'correct_option': 'b'},
    {'level': 1, 'question_text': 'Which planet is closest to the Sun?',
     'option_a': 'Venus', 'option_b': 'Earth', 'option_c': 'Mercury', 'option_d': 'Mars', 'correct_option': 'c'},
    {'level': 2, 'question_text': 'What is the capital of Australia?',
     'option_a': 'Canberra', 'option_b': 'Sydney', 'option_c': 'Melbourne', 'option_d': 'Perth', 'correct_option': 'a'},
    {'level': 3, 'question_text': 'Which gas do plants absorb from the air?',
     'option_a': 'Oxygen', 'option_b': 'Nitrogen', 'option_c': 'Helium', 'option_d': 'Carbon dioxide', 'correct_option': 'd'},
    {'level': 4, 'question_text': 'Who painted "The Night Watch"?',
     'option_a': 'Vermeer', 'option_b': 'Rembrandt', 'option_c': 'Rubens', 'option_d': 'Van Gogh', 'correct_option': 'b'},
    {'level': 5, 'question_text': 'In which year did the Berlin Wall fall?',
     'option_a': '1987', 'option_b': '1991', 'option_c': '1989', 'option_d': '1993', 'correct_option': 'c'},
    {'level': 6, 'question_text': 'What is the chemical symbol of tungsten?',
     'option_a': 'W', 'option_b': 'Tu', 'option_c': 'Tn', 'option_d': 'Wo', 'correct_option': 'a'},
    {'level': 7, 'question_text': 'Which composer wrote "The Rite of Spring"?',
     'option_a': 'Prokofiev', 'option_b': 'Rachmaninoff', 'option_c': 'Shostakovich', 'option_d': 'Stravinsky',
     'correct_option': 'd'},
    {'level': 8, 'question_text': 'What is the longest river in Europe?',
     'option_a': 'Danube', 'option_b': 'Volga', 'option_c': 'Rhine', 'option_d': 'Dnieper', 'correct_option': 'b'},
    {'level': 9, 'question_text': 'Which mathematician proved the incompleteness theorems?',
     'option_a': 'Hilbert', 'option_b': 'Turing', 'option_c': 'Goedel', 'option_d': 'Cantor', 'correct_option': 'c'},
    {'level': 10, 'question_text': 'What was the original name of the city of Istanbul before Constantinople?',
     'option_a': 'Byzantium', 'option_b': 'Nicaea', 'option_c': 'Chalcedon', 'option_d': 'Troy', 'correct_option': 'a'},
    {'level': 11, 'question_text': 'Which element has the highest melting point?',
     'option_a': 'Iron', 'option_b': 'Osmium', 'option_c': 'Titanium', 'option_d': 'Tungsten', 'correct_option': 'd'},
    {'level': 12, 'question_text': 'Who was the first person to reach the South Pole?',
     'option_a': 'Scott', 'option_b': 'Amundsen', 'option_c': 'Shackleton', 'option_d': 'Byrd', 'correct_option': 'b'},
    {'level': 13, 'question_text': 'Which language has the most native speakers in Nigeria?',
     'option_a': 'Yoruba', 'option_b': 'Igbo', 'option_c': 'Hausa', 'option_d': 'English', 'correct_option': 'c'},
    {'level': 14, 'question_text': 'In which year was the Treaty of Westphalia signed?',
     'option_a': '1648', 'option_b': '1618', 'option_c': '1713', 'option_d': '1555', 'correct_option': 'a'},
]


def create_questions(session):
    """Create test questions, skipping texts that already exist."""
    created = 0
    for question_data in QUESTIONS_DATA:
        existing = (
            session.query(Question)
            .filter(Question.question_text == question_data['question_text'])
            .first()
        )
        if existing:
            logger.info(f"Question already exists: {question_data['question_text']}")
            continue
        session.add(Question(**question_data))
        created += 1

    session.flush()
    counts = QuestionQueries.count_by_level(session)
    missing = [level for level in range(LEVEL_COUNT) if not counts.get(level)]
    if missing:
        logger.warning(f"Levels without questions: {missing}")
    logger.info(f"Created {created} questions")
    return created


def main():
    """Add test data."""
    username = sys.argv[1] if len(sys.argv) > 1 else "demo"
    logger.info("Adding test data...")

    try:
        with db_session() as session:
            create_questions(session)
            user = UserQueries.get_or_create_user(session, username)
            logger.info(f"User {user.username} has id {user.id}")
        logger.info("Test data added successfully!")
    except Exception as e:
        logger.error(f"Error adding test data: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
