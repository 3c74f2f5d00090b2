"""
Spelling Bee Hint System - Web Backend
======================================

Flask JSON API over the hint engine:
- List the available hint levels
- Compute every hint phase for a player's found words
- Compute a single hint level
- Report how many answers today's puzzle has

Run with: python hints_app.py
"""

import os
from datetime import date

import requests
from flask import Flask, jsonify, request
from flask_cors import CORS

from answer_store import ANSWERS_FILE, AnswerStore
from hint_engine import HintSequencer
from word_lists import normalize_words

app = Flask(__name__)
CORS(app)

sequencer = HintSequencer()

# Answers already loaded by this worker, keyed by date
_answers_by_date = {}


def get_answers():
    """Today's answers, from memory, the daily cache or a fresh scrape"""
    today = date.today()
    if today not in _answers_by_date:
        answers = AnswerStore(ANSWERS_FILE, today=today).load()
        if not answers:
            return answers
        _answers_by_date.clear()
        _answers_by_date[today] = answers

    return _answers_by_date[today]


def get_found_words():
    """Pull the player's words out of the JSON body; None if it's malformed"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None

    words = data.get('words')
    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        return None

    return normalize_words(words)


def answers_or_error():
    try:
        return get_answers(), None
    except requests.exceptions.RequestException as e:
        print(f"Error fetching answers: {e}")
        return None, (jsonify({'error': 'Could not fetch today\'s answers'}), 502)


# ============================================================================
# API ROUTES
# ============================================================================

@app.route('/api/hints/types')
def get_hint_types():
    return jsonify([
        {'level': level, 'title': hint_type.title}
        for level, hint_type in enumerate(sequencer.hint_types, 1)
    ])


@app.route('/api/hints', methods=['POST'])
def get_all_hints():
    """Every hint phase for the posted words"""
    found = get_found_words()
    if found is None:
        return jsonify({'error': 'Body must be JSON with a "words" list'}), 400

    answers, error = answers_or_error()
    if error:
        return error

    return jsonify({
        'date': date.today().isoformat(),
        'phases': [phase.to_dict() for phase in sequencer.phases(found, answers)],
    })


@app.route('/api/hints/<int:level>', methods=['POST'])
def get_hint(level):
    """A single hint phase"""
    if not 1 <= level <= len(sequencer):
        return jsonify({'error': 'Invalid hint level'}), 400

    found = get_found_words()
    if found is None:
        return jsonify({'error': 'Body must be JSON with a "words" list'}), 400

    answers, error = answers_or_error()
    if error:
        return error

    phase = sequencer.phase(level, found, answers)
    return jsonify(dict(phase.to_dict(), total=phase.total))


@app.route('/api/answers/today')
def get_answer_count():
    """How many answers today's puzzle has, without revealing them"""
    answers, error = answers_or_error()
    if error:
        return error

    return jsonify({'date': date.today().isoformat(), 'count': len(answers)})


if __name__ == '__main__':
    print("\n" + "=" * 70)
    print("🐝 SPELLING BEE HINT SYSTEM")
    print("=" * 70)
    print("\nServer starting...")
    print("API: http://localhost:5000/api/hints")
    print("\nPress Ctrl+C to stop\n")

    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
