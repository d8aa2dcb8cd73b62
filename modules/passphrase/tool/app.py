from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from modules.passphrase.core.generate import PassphraseGenerator, generate_passphrases
from modules.passphrase.core.settings import Preset
from modules.passphrase.core.words import DEFAULT_DICT_PATH
from passforge.errors import ValidationNormalizeMiddleware, error_response
from passforge.settings import dictionary_path, max_batch_count, shared_templates_dir

app = FastAPI(title="Passphrase Generator")
app.add_middleware(ValidationNormalizeMiddleware)

BASE_DIR = Path(__file__).parent
ROOT_DIR = BASE_DIR.parents[2]
SHARED_TEMPLATES = shared_templates_dir(ROOT_DIR)

templates = Jinja2Templates(
    directory=[str(BASE_DIR / "templates"), str(SHARED_TEMPLATES)]
)


@lru_cache(maxsize=1)
def get_generator() -> PassphraseGenerator:
    return PassphraseGenerator.from_file(dictionary_path() or DEFAULT_DICT_PATH)


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    base_path = request.url.path.rstrip("/")
    return templates.TemplateResponse(
        request,
        "passphrase.html",
        {"presets": [preset.value for preset in Preset], "base_path": base_path},
    )


@app.get("/presets")
def presets():
    return {"presets": [preset.value for preset in Preset]}


@app.post("/generate")
def generate(
    preset: str | None = Form(None),
    count: str | None = Form(None),
    words: str | None = Form(None),
    min_length: str | None = Form(None),
    max_length: str | None = Form(None),
    transforms: str | None = Form(None),
    separators: str | None = Form(None),
    digits_before: str | None = Form(None),
    digits_after: str | None = Form(None),
    symbols: str | None = Form(None),
    symbols_before: str | None = Form(None),
    symbols_after: str | None = Form(None),
    adaptive_length: str | None = Form(None),
    seed: str | None = Form(None),
):
    result, error = generate_passphrases(
        preset,
        count,
        seed=seed,
        max_count=max_batch_count(),
        generator=get_generator(),
        words=words,
        min_length=min_length,
        max_length=max_length,
        transforms=transforms,
        separators=separators,
        digits_before=digits_before,
        digits_after=digits_after,
        symbols=symbols,
        symbols_before=symbols_before,
        symbols_after=symbols_after,
        adaptive_length=adaptive_length,
    )
    if error:
        return error_response(error)
    return result
