#!/usr/bin/env python3
"""
Spelling Bee Hints - Command Line

Compares your found words (one per line in a text file) with today's
answers from nytbee.com and offers progressively stronger hints, asking
before each new one.

Usage:
    python spelling_hints.py
    python spelling_hints.py --words my_words.txt
    python spelling_hints.py --all          # show every hint without asking
"""

import argparse
import os
import sys

import requests

from answer_store import ANSWERS_FILE, AnswerStore
from hint_engine import HintSequencer
from word_lists import read_word_file

WORDS_FILE = os.environ.get('SPELLING_WORDS_FILE', 'lib/words.txt')


def ask_for_more() -> bool:
    answer = input("\nDo you need more hints (y/n?) ")
    if not answer.strip().lower().startswith('y'):
        return False

    print("\n***\n")
    return True


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Progressive hints for the NYT Spelling Bee')
    parser.add_argument('--words', default=WORDS_FILE,
                        help='File with the words you have found, one per line')
    parser.add_argument('--answers', default=ANSWERS_FILE,
                        help="Cache file for today's answers (the date is added to the name)")
    parser.add_argument('--all', action='store_true',
                        help='Show every hint without asking')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    words_list = read_word_file(args.words)

    try:
        answers_list = AnswerStore(args.answers).load()
    except requests.exceptions.RequestException as e:
        print(f"Error fetching answers: {e}")
        return 1

    should_continue = (lambda: True) if args.all else ask_for_more
    HintSequencer().run(words_list, answers_list, should_continue)
    return 0


if __name__ == '__main__':
    sys.exit(main())
