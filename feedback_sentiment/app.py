import logging
from typing import Any, Dict, List, Optional

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from . import config
from .features.lexicon import DEFAULT_LEXICON, Lexicon
from .features.sentiment import analyze, analyze_batch, annotate, sentiment_emoji
from .features.stats import summarize

log = logging.getLogger(__name__)


def _load_lexicon() -> Lexicon:
    # Optional JSON override; a broken file should stop startup, not fall back silently
    if config.SENTIMENT_LEXICON_PATH:
        return Lexicon.from_json(config.SENTIMENT_LEXICON_PATH, extend=config.SENTIMENT_LEXICON_EXTEND)
    return DEFAULT_LEXICON


def _body() -> Dict[str, Any]:
    payload = request.get_json(force=True, silent=True)          # parse JSON payload
    if not isinstance(payload, dict):
        raise BadRequest("request body must be a JSON object")
    return payload


def _list_field(payload: Dict[str, Any], key: str) -> List[Any]:
    items = payload.get(key)
    if not isinstance(items, list):
        raise BadRequest(f"'{key}' must be a list")
    limit = current_app.config["MAX_BATCH_SIZE"]
    if len(items) > limit:
        raise BadRequest(f"'{key}' holds {len(items)} items; limit is {limit}")
    return items


def _result_json(result) -> Dict[str, Any]:
    out = result.to_dict()
    out["emoji"] = sentiment_emoji(result.label)
    return out


def create_app(lexicon: Optional[Lexicon] = None) -> Flask:
    app = Flask(__name__)
    app.config["SENTIMENT_LEXICON"] = lexicon or _load_lexicon()
    app.config["BATCH_WORKERS"] = config.SENTIMENT_BATCH_WORKERS
    app.config["MAX_BATCH_SIZE"] = config.MAX_BATCH_SIZE

    @app.errorhandler(BadRequest)
    def bad_request(e):
        log.warning("Rejected %s %s: %s", request.method, request.path, e.description)
        return jsonify({"error": e.description}), 400

    @app.route("/healthz", methods=["GET"])
    def healthz():
        return jsonify({"status": "ok", "lexicon": app.config["SENTIMENT_LEXICON"].sizes()})

    @app.route("/api/sentiment/analyze", methods=["POST"])
    def analyze_text():
        text = _body().get("text")
        if not isinstance(text, str):
            raise BadRequest("'text' must be a string")
        return jsonify(_result_json(analyze(text, app.config["SENTIMENT_LEXICON"])))

    @app.route("/api/sentiment/batch", methods=["POST"])
    def analyze_texts():
        texts = _list_field(_body(), "texts")
        if not all(isinstance(t, str) for t in texts):
            raise BadRequest("'texts' must contain only strings")
        results = analyze_batch(texts, app.config["SENTIMENT_LEXICON"], workers=app.config["BATCH_WORKERS"])
        return jsonify({"results": [_result_json(r) for r in results]})

    @app.route("/api/sentiment/stats", methods=["POST"])
    def feedback_stats():
        records = _list_field(_body(), "feedback")
        for rec in records:
            if not isinstance(rec, dict):
                raise BadRequest("each feedback item must be an object")
            score = rec.get("sentimentScore")
            if score is not None and (isinstance(score, bool) or not isinstance(score, (int, float))):
                raise BadRequest("'sentimentScore' must be a number or null")
        return jsonify(summarize(records).to_dict())

    @app.route("/api/feedback/annotate", methods=["POST"])
    def annotate_feedback():
        record = _body()
        if not isinstance(record.get("content"), str):
            raise BadRequest("'content' must be a string")
        return jsonify(annotate(record, app.config["SENTIMENT_LEXICON"]))

    return app


if __name__ == "__main__":
    app = create_app()
    print(f"Sentiment service running at http://localhost:{config.APP_PORT}/api/sentiment/analyze")
    app.run(host=config.APP_HOST, port=config.APP_PORT, threaded=True, debug=True)  # dev server
