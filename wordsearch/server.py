import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wordsearch.engine import WordSearchEngine
from wordsearch.errors import InvalidInputError, NotReadyError
from wordsearch.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("boggle")


def create_app(engine: WordSearchEngine | None = None) -> FastAPI:
    from contextlib import asynccontextmanager

    engine = engine or WordSearchEngine()

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        if settings.DEBUG:
            logger.setLevel(logging.DEBUG)
        if not engine.lexicon.loaded and settings.DICTIONARY_PATH.exists():
            logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
            engine.load_lexicon(settings.DICTIONARY_PATH)
        elif not engine.lexicon.loaded:
            logger.warning("No dictionary at %s; POST /lexicon to load one", settings.DICTIONARY_PATH)
        yield

    application = FastAPI(title="Word Search", lifespan=lifespan)
    application.state.engine = engine

    @application.exception_handler(InvalidInputError)
    async def invalid_input(request: Request, exc: InvalidInputError):
        return JSONResponse({"detail": str(exc)}, status_code=400)

    @application.exception_handler(NotReadyError)
    async def not_ready(request: Request, exc: NotReadyError):
        return JSONResponse({"detail": str(exc)}, status_code=409)

    @application.get("/health")
    async def health():
        return {"status": "ok", "lexicon_loaded": engine.lexicon.loaded, "word_count": len(engine.lexicon)}

    @application.post("/lexicon")
    async def load_lexicon(request: Request):
        body = await _json_object(request)
        if "words" in body:
            count = engine.load_words(_string_list(body["words"], "words"))
        else:
            count = engine.load_lexicon(body.get("path"))
        return {"word_count": count}

    @application.put("/board")
    async def set_board(request: Request):
        body = await _json_object(request)
        engine.set_board(_string_list(body.get("tiles"), "tiles"))
        return {"size": engine.board.size, "board": engine.board_text}

    @application.get("/board")
    async def get_board():
        return {"size": engine.board.size, "rows": engine.board.rows, "board": engine.board_text}

    @application.get("/words/{word}")
    async def valid_word(word: str):
        return {"word": word.upper(), "valid": engine.is_valid_word(word)}

    @application.get("/prefixes/{prefix}")
    async def valid_prefix(prefix: str):
        return {"prefix": prefix.upper(), "valid": engine.is_valid_prefix(prefix)}

    @application.get("/paths/{word}")
    async def word_path(word: str):
        path = engine.is_on_board(word)
        return {"word": word.upper(), "found": bool(path), "path": path}

    @application.get("/scorable")
    async def scorable(min_length: int | None = None):
        if min_length is None:
            min_length = settings.MIN_WORD_LENGTH
        words = engine.all_scorable_words(min_length)
        total = len(words)
        if settings.MAX_RESULTS > 0:
            words = words[:settings.MAX_RESULTS]
        logger.info("Found %d scorable words (returning %d)", total, len(words))
        return {"min_length": min_length, "word_count": total, "words": words}

    @application.post("/score")
    async def score(request: Request):
        body = await _json_object(request)
        min_length = body.get("min_length", settings.MIN_WORD_LENGTH)
        words = _string_list(body.get("words"), "words")
        return {"min_length": min_length, "score": engine.score_for_words(words, min_length)}

    @application.get("/api/settings")
    async def api_get_settings():
        from wordsearch.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordsearch.settings import update_settings, get_editable_settings
        body = await _json_object(request)
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


def _string_list(value, what: str) -> list[str]:
    if not isinstance(value, list):
        raise InvalidInputError(f"{what} must be a JSON array")
    return value


async def _json_object(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError as e:
        raise InvalidInputError(f"request body is not valid JSON: {e}") from e
    if not isinstance(body, dict):
        raise InvalidInputError("request body must be a JSON object")
    return body


app = create_app()
