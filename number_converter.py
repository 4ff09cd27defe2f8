import logging
import os

from flask import Blueprint, Flask, current_app, jsonify, render_template_string, request
from flask_cors import CORS
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from converter import DEFAULT_BIT_WIDTH, MAX_BIT_WIDTH, MIN_BIT_WIDTH
from errors import InvalidBitWidthError, InvalidModeError, InvalidValueError, NumError
from payloads import BitWidthPayload, ModePayload, NumberPayload
from state import DEFAULT_MODE, MODES, ConverterState

logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')
STATE_KEY = "num_state"

HTML_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <title>Num - Number Representation Tool</title>
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Roboto&display=swap');
        body { font-family: 'Roboto', sans-serif; margin: 0; padding: 0;
            background: linear-gradient(135deg, #667eea, #764ba2); min-height: 100vh;
            color: #f1f1f1; display: flex; justify-content: center; align-items: center; }
        .container { background: rgba(0,0,0,0.75); border-radius: 12px; box-shadow: 0 8px 24px rgba(0,0,0,0.3);
            width: 760px; padding: 30px 40px 40px 40px; box-sizing: border-box; }
        h1 { margin-bottom: 10px; font-weight: 700; font-size: 2.4rem; letter-spacing: 1.2px; text-align: center; text-shadow: 2px 2px 6px #222; }
        label { display: block; margin-top: 20px; font-weight: 600; user-select: none; letter-spacing: 0.05em; }
        input[type=text], input[type=number], button {
            padding: 12px 15px; font-size: 1rem; border-radius: 8px; border: none;
            outline: none; box-sizing: border-box; transition: 0.3s; font-family: monospace;
        }
        input[type=text]:focus, input[type=number]:focus { box-shadow: 0 0 8px #764ba2; background-color: #fff; color: #333; }
        button { background: #764ba2; color: #fff; cursor: pointer; font-weight: 700; letter-spacing: 0.1em;
            transition: background-color 0.3s ease; }
        button:hover, button.active { background: #667eea; }
        .row { display: flex; gap: 12px; margin-top: 12px; align-items: center; }
        .row input[type=text] { flex: 1; }
        .input-mode { font-family: monospace; font-weight: 700; min-width: 4em; }
        .result { margin-top: 25px; padding: 15px; border-radius: 8px; box-sizing: border-box;
            font-family: 'Courier New', Courier, monospace; white-space: pre-wrap; word-wrap: break-word;
            background: #222; color: #a8ffc7; line-height: 1.6; box-shadow: inset 0 0 10px #2ecc71; }
        .result strong { display: inline-block; min-width: 8em; }
        .copy-btn { padding: 2px 8px; margin-left: 8px; font-size: 0.8rem; }
        .copy-success { background: #2ecc71; }
        footer { user-select: none; font-size: 0.9rem; text-align: center; color: #ccc; margin-top: 30px; }
        @media(max-width: 800px) {
            .container { width: 95vw; padding: 25px 20px; }
            h1 { font-size: 1.8rem; }
        }
    </style>
</head>
<body>
<div class="container">
    <h1>Num</h1>
    <label>Input Mode:</label>
    <div class="row">
        {% for mode in modes %}
            <button type="button" id="mode-{{ mode }}" class="{% if mode == current_mode %}active{% endif %}">{{ mode|upper }}</button>
        {% endfor %}
        <label for="bit-width" style="margin: 0 0 0 auto;">Bit Width:</label>
        <input type="number" id="bit-width" min="{{ min_width }}" max="{{ max_width }}" value="{{ bit_width }}" />
    </div>
    <div class="row">
        <span class="input-mode">{{ current_mode|upper }}&gt;</span>
        <input type="text" id="number-input" placeholder="Enter decimal number..." autocomplete="off" />
    </div>
    <div class="row">
        <button type="button" id="op-invert">Invert (I)</button>
        <button type="button" id="op-shift-left">Shift &lt;&lt; (L)</button>
        <button type="button" id="op-shift-right">Shift &gt;&gt; (R)</button>
        <button type="button" id="op-reverse">Reverse (V)</button>
    </div>
    <div class="result">
        {% for key, title in fields %}
        <strong>{{ title }}:</strong> <span id="{{ key }}-value"></span><button type="button" class="copy-btn" data-value="{{ key }}-value">&#128203;</button><br>
        {% endfor %}
    </div>
    <footer>
        D / H / B switch mode &middot; I / L / R / V apply operations
    </footer>
</div>
<script>
    document.addEventListener('DOMContentLoaded', function() {
        const modeNames = { dec: 'DEC', hex: 'HEX', bin: 'BIN' };
        const placeholders = { dec: 'Enter decimal number...', hex: 'Enter hex number...', bin: 'Enter binary number...' };
        const numberInput = document.getElementById('number-input');
        const bitWidthInput = document.getElementById('bit-width');
        let currentMode = '{{ current_mode }}';
        let timer = null;

        async function call(url, body) {
            const options = body === undefined ? {} : {
                method: 'POST', headers: { 'Content-Type': 'application/json' }, body: JSON.stringify(body)
            };
            const response = await fetch(url, options);
            const data = await response.json();
            if (!response.ok) {
                console.error(url + ': ' + data.error);
                return null;
            }
            return data;
        }

        function updateModeUI() {
            Object.keys(modeNames).forEach(mode => {
                document.getElementById('mode-' + mode).classList.toggle('active', mode === currentMode);
            });
            document.querySelector('.input-mode').textContent = modeNames[currentMode] + '>';
            numberInput.placeholder = placeholders[currentMode];
        }

        function updateDisplay(data) {
            if (!data) return;
            if (data.representations) {
                const reps = data.representations;
                document.getElementById('decimal-value').textContent = reps.decimal;
                document.getElementById('hexadecimal-value').textContent = reps.hexadecimal;
                document.getElementById('binary-value').textContent = reps.binary.replace(/(.{4})/g, '$1 ').trim();
                document.getElementById('octal-value').textContent = reps.octal;
                document.getElementById('english-value').textContent = reps.english;
                document.getElementById('roman-value').textContent = reps.roman;
            }
            if (data.mode !== undefined) {
                currentMode = data.mode;
                updateModeUI();
            }
            if (data.bitWidth !== undefined) {
                bitWidthInput.value = data.bitWidth;
            }
        }

        async function setMode(mode) {
            updateDisplay(await call('/api/mode', { mode: mode }));
        }

        async function updateNumber(value) {
            if (!value.trim()) return;
            updateDisplay(await call('/api/number', { value: value, mode: currentMode }));
        }

        async function performOperation(operation) {
            const data = await call('/api/' + operation, {});
            if (data) {
                updateDisplay(data);
                numberInput.value = '';
            }
        }

        async function copyToClipboard(text, button) {
            try {
                await navigator.clipboard.writeText(text);
                button.classList.add('copy-success');
                setTimeout(() => button.classList.remove('copy-success'), 1000);
            } catch (error) {
                console.error('Failed to copy to clipboard:', error);
            }
        }

        Object.keys(modeNames).forEach(mode => {
            document.getElementById('mode-' + mode).addEventListener('click', () => setMode(mode));
        });
        numberInput.addEventListener('input', () => {
            clearTimeout(timer);
            timer = setTimeout(() => updateNumber(numberInput.value), 300);
        });
        numberInput.addEventListener('keydown', e => {
            if (e.key === 'Enter') {
                clearTimeout(timer);
                updateNumber(numberInput.value);
            }
        });
        bitWidthInput.addEventListener('change', async () => {
            updateDisplay(await call('/api/bitwidth', { width: parseInt(bitWidthInput.value) }));
        });
        document.getElementById('op-invert').addEventListener('click', () => performOperation('invert'));
        document.getElementById('op-shift-left').addEventListener('click', () => performOperation('shift-left'));
        document.getElementById('op-shift-right').addEventListener('click', () => performOperation('shift-right'));
        document.getElementById('op-reverse').addEventListener('click', () => performOperation('reverse-bits'));
        document.querySelectorAll('.copy-btn').forEach(btn => {
            btn.addEventListener('click', () => {
                copyToClipboard(document.getElementById(btn.getAttribute('data-value')).textContent, btn);
            });
        });

        const shortcuts = {
            d: () => setMode('dec'), h: () => setMode('hex'), b: () => setMode('bin'),
            i: () => performOperation('invert'), l: () => performOperation('shift-left'),
            r: () => performOperation('shift-right'), v: () => performOperation('reverse-bits')
        };
        document.addEventListener('keydown', e => {
            if (e.target.tagName === 'INPUT') return;
            const action = shortcuts[e.key.toLowerCase()];
            if (action) {
                e.preventDefault();
                action();
            }
        });

        call('/api/state').then(updateDisplay);
    });
</script>
</body>
</html>
"""

FIELDS = [
    ("decimal", "Decimal"),
    ("hexadecimal", "Hexadecimal"),
    ("binary", "Binary"),
    ("octal", "Octal"),
    ("english", "English"),
    ("roman", "Roman"),
]

bp = Blueprint("num", __name__)


def get_state() -> ConverterState:
    return current_app.extensions[STATE_KEY]


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _number_response(state: ConverterState):
    with state.lock:
        return jsonify(number=state.number, representations=state.representations())


def _apply(operation: str):
    state = get_state()
    with state.lock:
        state.apply(operation)
        return _number_response(state)


@bp.route("/", methods=["GET"])
def index():
    state = get_state()
    return render_template_string(
        HTML_TEMPLATE,
        modes=list(MODES),
        current_mode=state.mode,
        bit_width=state.bit_width,
        min_width=MIN_BIT_WIDTH,
        max_width=MAX_BIT_WIDTH,
        fields=FIELDS,
    )


@bp.route("/api/state", methods=["GET"])
def get_current_state():
    return jsonify(get_state().snapshot())


@bp.route("/api/number", methods=["POST"])
def set_number():
    body = _json_body()
    try:
        payload = NumberPayload.model_validate(body)
    except ValidationError as e:
        raise InvalidValueError(body.get("value")) from e
    state = get_state()
    with state.lock:
        state.set_number(payload.value, payload.mode)
        return _number_response(state)


@bp.route("/api/mode", methods=["POST"])
def set_mode():
    body = _json_body()
    try:
        payload = ModePayload.model_validate(body)
    except ValidationError as e:
        raise InvalidModeError(body.get("mode")) from e
    return jsonify(mode=get_state().set_mode(payload.mode))


@bp.route("/api/bitwidth", methods=["POST"])
def set_bit_width():
    body = _json_body()
    try:
        payload = BitWidthPayload.model_validate(body)
    except ValidationError as e:
        raise InvalidBitWidthError(body.get("width")) from e
    state = get_state()
    with state.lock:
        state.set_bit_width(payload.width)
        return jsonify(bitWidth=state.bit_width, representations=state.representations())


@bp.route("/api/invert", methods=["POST"])
def invert():
    return _apply("invert")


@bp.route("/api/shift-left", methods=["POST"])
def shift_left():
    return _apply("shift-left")


@bp.route("/api/shift-right", methods=["POST"])
def shift_right():
    return _apply("shift-right")


@bp.route("/api/reverse-bits", methods=["POST"])
def reverse_bits():
    return _apply("reverse-bits")


@bp.route("/api/english", methods=["GET"])
def english():
    state = get_state()
    with state.lock:
        return jsonify(english=state.converter.number_to_english(state.number))


@bp.route("/api/roman", methods=["GET"])
def roman():
    state = get_state()
    with state.lock:
        return jsonify(roman=state.converter.number_to_roman(state.number))


@bp.errorhandler(NumError)
def handle_num_error(e):
    logging.warning(f"Rejected {request.method} {request.path}: {e}")
    return jsonify(error=str(e)), 400


def handle_unexpected_error(e):
    if isinstance(e, HTTPException):
        return e
    logging.error(f"An unhandled exception occurred: {e}", exc_info=True)
    return jsonify(error="A critical server error occurred. Please try again."), 500


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_BIT_WIDTH=DEFAULT_BIT_WIDTH, DEFAULT_MODE=DEFAULT_MODE)
    app.config.from_prefixed_env("NUM")
    if test_config is not None:
        app.config.from_mapping(test_config)

    app.extensions[STATE_KEY] = ConverterState(
        app.config["DEFAULT_BIT_WIDTH"], app.config["DEFAULT_MODE"]
    )
    app.register_blueprint(bp)
    CORS(app)
    app.register_error_handler(Exception, handle_unexpected_error)
    logging.info(
        f"Converter ready: {app.config['DEFAULT_BIT_WIDTH']} bits, mode {app.config['DEFAULT_MODE']}"
    )
    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True, port=int(os.environ.get("PORT", 5001)), threaded=False)
