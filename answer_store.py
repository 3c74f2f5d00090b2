#!/usr/bin/env python3
"""
Daily Answer Cache

Keeps one answer file per day so nytbee.com is only scraped once:
- Date-stamping the cache filename
- Reading today's cached answers
- Downloading and saving them when there's no cache yet
"""

import os
from datetime import date
from pathlib import Path
from typing import List, Optional

from answer_scraper import NytBeeScraper
from word_lists import read_word_file, write_word_file

ANSWERS_FILE = os.environ.get('SPELLING_ANSWERS_FILE', 'lib/answers.txt')


def dated_filename(filename, today: Optional[date] = None) -> Path:
    """
    Insert today's date before the file extension

    Example: lib/answers.txt -> lib/answers2026-10-19.txt
    """
    today = today or date.today()
    path = Path(filename)
    stamp = f"{today.year}-{today.month}-{today.day}"
    return path.with_name(f"{path.stem}{stamp}{path.suffix}")


class AnswerStore:
    def __init__(self, filename=ANSWERS_FILE, scraper: Optional[NytBeeScraper] = None,
                 today: Optional[date] = None):
        self.today = today or date.today()
        self.answers_file = dated_filename(filename, self.today)
        self.scraper = scraper or NytBeeScraper()
        self.find_methods = [self.read_cached, self.download]

    def load(self) -> List[str]:
        """Try each way of finding the answers in turn; the first non-empty result wins"""
        for method in self.find_methods:
            results = method()
            if results:
                return results

        return []

    def read_cached(self) -> List[str]:
        return read_word_file(self.answers_file)

    def download(self) -> List[str]:
        """Scrape today's answers and cache them"""
        answers = self.scraper.fetch_answers()['answers']

        write_word_file(self.answers_file, answers)
        print(f"📦 Answers cached in {self.answers_file}")
        return answers
