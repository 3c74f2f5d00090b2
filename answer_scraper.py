"""
NYT Spelling Bee Answer Scraper

Fetches the day's full answer list from the nytbee.com analysis site.
Pangrams are shown in bold there, so they're reported separately too.
"""

import os
from datetime import datetime
from typing import Dict, List, Tuple

import requests
from bs4 import BeautifulSoup

from word_lists import normalize_word

NYTBEE_URL = os.environ.get('NYTBEE_URL', 'https://www.nytbee.com/')
ANSWER_SELECTOR = '#main-answer-list > .column-list > li'


class NytBeeScraper:
    """Scrapes today's answers from nytbee.com"""

    def __init__(self, site: str = NYTBEE_URL, selector: str = ANSWER_SELECTOR, timeout: int = 30):
        self.site = site
        self.selector = selector
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'
        })

    def fetch_answers(self) -> Dict:
        """
        Download and parse the answer list

        One attempt only: HTTP and connection errors are raised to the
        caller.

        Returns:
            Dict with 'date', 'answers' (sorted) and 'pangrams'
        """
        print(f"Downloading words from {self.site}\n")

        response = self.session.get(self.site, timeout=self.timeout)
        response.raise_for_status()

        answers, pangrams = self.parse_answers(response.content)
        print(f"✓ Found {len(answers)} answers ({len(pangrams)} pangrams)")

        return {
            'date': datetime.now().strftime('%Y-%m-%d'),
            'answers': answers,
            'pangrams': pangrams,
        }

    def parse_answers(self, html) -> Tuple[List[str], List[str]]:
        soup = BeautifulSoup(html, 'html.parser')
        answers = []
        pangrams = []

        for item in soup.select(self.selector):
            strong = item.find('strong')
            word = normalize_word(strong.get_text() if strong else item.get_text())
            if not word:
                continue

            answers.append(word)
            if strong:
                pangrams.append(word)

        return sorted(answers), sorted(pangrams)
