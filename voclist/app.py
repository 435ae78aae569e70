"""
VocList - Flask Web Application

JSON endpoints for correcting words and adding them to vocabulary.com lists.

Routes:
- /api/correct, /api/reconcile, /api/grab: word correction
- /api/preview: how a word will be stored in a list
- /api/lists/...: list the user's lists, load, add to, create, delete
- /api/progress/<word>: learning progress
"""

import requests
from flask import Flask, request, jsonify

from .config import VERSION, URLBASE, DEFAULT_ANNOTATION_MODE
from .errors import (
    APIResponseError, ListNameNotCached, NoSuggestionsFound, NotLearnableError,
    VocabularyError,
)
from .models import WordEntry
from .api.client import VocabularyAPI
from .correction.corrector import WordCorrector
from .lists.manager import ListManager
from .lists.mapper import to_persisted_form

# Initialize Flask app
app = Flask(__name__)

# Global instances (lazy loaded)
_api = None
_corrector = None
_list_manager = None


def get_api():
    """Get or create the vocabulary.com client."""
    global _api
    if _api is None:
        _api = VocabularyAPI(use_cache=True)
    return _api


def get_corrector():
    """Get or create the word corrector."""
    global _corrector
    if _corrector is None:
        _corrector = WordCorrector.from_api(get_api())
    return _corrector


def get_list_manager():
    """Get or create the list manager."""
    global _list_manager
    if _list_manager is None:
        _list_manager = ListManager(get_api(), get_corrector())
    return _list_manager


def _json_body():
    """The request's JSON object, None when the body is not an object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def _entries_from(data):
    """Word entries from a request body: strings or objects."""
    items = data.get('words')
    if not isinstance(items, list):
        return []

    entries = []
    for item in items:
        if isinstance(item, str):
            if item.strip():
                entries.append(WordEntry(word=item.strip()))
        elif isinstance(item, dict) and item.get('word'):
            entries.append(WordEntry.from_dict(item))
    return entries


def _error(message, status=200):
    return jsonify({'success': False, 'error': message}), status


def _service_error(e):
    """Response for a failed call to vocabulary.com."""
    if isinstance(e, APIResponseError):
        return _error(f'Vocabulary.com answered {e.status}', 502)
    if isinstance(e, requests.RequestException):
        return _error(f'Could not reach Vocabulary.com: {e}', 502)
    return _error(str(e), 400)


# =============================================================================
# ROUTES - STATUS
# =============================================================================

@app.route('/')
@app.route('/api/status')
def api_status():
    """Service information."""
    manager = get_list_manager()
    return jsonify({
        'version': VERSION,
        'service': URLBASE,
        'annotation_mode': manager.annotation_mode.value,
        'known_lists': get_api().list_names.snapshot(),
    })


# =============================================================================
# ROUTES - CORRECTION
# =============================================================================

@app.route('/api/correct')
def api_correct():
    """Correct a single word."""
    word = request.args.get('word', '').strip()
    if not word:
        return _error('No word specified')

    try:
        corrected = get_corrector().correct_word(word)
    except NoSuggestionsFound as e:
        return _error(str(e), 404)
    except (VocabularyError, requests.RequestException) as e:
        return _service_error(e)

    return jsonify({
        'success': True,
        'word': word,
        'corrected': corrected,
        'changed': corrected != word,
    })


@app.route('/api/reconcile', methods=['POST'])
def api_reconcile():
    """Correct a list of words without saving them."""
    data = _json_body()
    if data is None:
        return _error('No words specified')
    entries = _entries_from(data)

    try:
        result = get_corrector().reconcile(entries)
    except NoSuggestionsFound as e:
        return _error(str(e), 404)
    except (VocabularyError, requests.RequestException) as e:
        return _service_error(e)

    return jsonify({'success': True, **result.to_dict()})


@app.route('/api/grab', methods=['POST'])
def api_grab():
    """Find the vocabulary in a text."""
    text = (_json_body() or {}).get('text')
    if not isinstance(text, str) or not text.strip():
        return _error('No text specified')

    try:
        result = get_api().grab_words(text)
    except (VocabularyError, requests.RequestException) as e:
        return _service_error(e)

    return jsonify({'success': True, **result.to_dict()})


@app.route('/api/preview', methods=['POST'])
def api_preview():
    """Show how words would be stored in a list."""
    data = _json_body()
    if data is None:
        return _error('No words specified')
    mode = data.get('mode', DEFAULT_ANNOTATION_MODE)

    try:
        words = [to_persisted_form(e, mode) for e in _entries_from(data)]
    except ValueError:
        return _error(f'Unknown annotation mode: {mode}')

    return jsonify({'success': True, 'words': words})


# =============================================================================
# ROUTES - LISTS
# =============================================================================

@app.route('/api/lists')
def api_lists():
    """Lists owned by the user."""
    sort_by = request.args.get('sort', 'modifieddate')

    try:
        lists = get_api().get_lists(sort_by)
    except (VocabularyError, requests.RequestException) as e:
        return _service_error(e)

    return jsonify({'success': True, 'lists': lists, 'count': len(lists)})


@app.route('/api/lists/<list_id>')
def api_list_get(list_id):
    """Load one list."""
    try:
        data = get_api().get_list(list_id)
    except (VocabularyError, requests.RequestException) as e:
        return _service_error(e)

    return jsonify({
        'success': True,
        'name': get_api().get_list_name_or_none(list_id),
        'list': data,
    })


@app.route('/api/lists/<list_id>/name')
def api_list_name(list_id):
    """Cached name of a list."""
    try:
        name = get_api().get_list_name(list_id)
    except ListNameNotCached as e:
        return _error(str(e), 404)
    return jsonify({'success': True, 'id': list_id, 'name': name})


@app.route('/api/lists/<list_id>/add', methods=['POST'])
def api_list_add(list_id):
    """Correct words and add them to a list."""
    data = _json_body() or {}
    entries = _entries_from(data)
    if not entries:
        return _error('No words specified')

    manager = get_list_manager()
    if data.get('mode'):
        try:
            manager = ListManager(get_api(), get_corrector(), data['mode'])
        except ValueError:
            return _error(f"Unknown annotation mode: {data['mode']}")

    try:
        result = manager.add_to_list(entries, list_id)
    except NoSuggestionsFound as e:
        return _error(str(e), 404)
    except (VocabularyError, requests.RequestException) as e:
        return _service_error(e)

    return jsonify({'success': True, **result.to_dict()})


@app.route('/api/lists/new', methods=['POST'])
def api_list_new():
    """Create a list from words."""
    data = _json_body() or {}
    name = data.get('name')
    if not isinstance(name, str) or not name.strip():
        return _error('No list name specified')

    try:
        response = get_list_manager().add_to_new_list(
            _entries_from(data),
            name.strip(),
            data.get('description', ''),
            bool(data.get('shared', False)),
        )
    except (VocabularyError, requests.RequestException) as e:
        return _service_error(e)

    return jsonify({'success': True, 'response': response})


@app.route('/api/lists/<list_id>/delete', methods=['POST'])
def api_list_delete(list_id):
    """Delete a list."""
    try:
        get_api().delete_list(list_id)
    except (VocabularyError, requests.RequestException) as e:
        return _service_error(e)
    return jsonify({'success': True})


# =============================================================================
# ROUTES - PROGRESS
# =============================================================================

@app.route('/api/progress/<word>')
def api_progress(word):
    """Learning progress of a word."""
    try:
        progress = get_api().progress(word)
    except NotLearnableError as e:
        return _error(str(e), 404)
    except (VocabularyError, requests.RequestException) as e:
        return _service_error(e)

    return jsonify({'success': True, 'progress': progress.to_dict()})


@app.route('/api/progress/<word>/priority', methods=['POST'])
def api_progress_priority(word):
    """Set the learning priority of a word."""
    try:
        priority = int((_json_body() or {}).get('priority', 0))
    except (TypeError, ValueError):
        return _error('Priority must be -1, 0 or 1')

    try:
        get_api().set_priority(word, priority)
    except (VocabularyError, requests.RequestException) as e:
        return _service_error(e)
    return jsonify({'success': True, 'word': word, 'priority': priority})


@app.route('/api/progress/<word>/start', methods=['POST'])
def api_progress_start(word):
    """Start learning a word."""
    try:
        get_api().start_learning(word)
    except (VocabularyError, requests.RequestException) as e:
        return _service_error(e)
    return jsonify({'success': True, 'word': word})


# =============================================================================
# MAIN
# =============================================================================

def main(host='127.0.0.1', port=5002):
    """Run the application."""
    print(f"\n📚 VocList v{VERSION}")
    print(f"   Service: {URLBASE}")
    print(f"🌐 Starting server at http://{host}:{port}")
    print("   Press Ctrl+C to stop\n")

    app.run(host=host, port=port, debug=False, threaded=True)


if __name__ == '__main__':
    main()
