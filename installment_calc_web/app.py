import logging
import os

from flask import Flask, render_template, request

from installment_calc.currencies import CURRENCIES, normalize_currency
from installment_calc.formatter import format_money
from installment_calc.shell import CalculatorState, calculate, export_report, reset

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["ASSET_VERSION"] = os.environ.get("ASSET_VERSION", "1")
app.config["DEFAULT_CURRENCY"] = normalize_currency(os.environ.get("INSTALLMENT_CALC_DEFAULT_CURRENCY"))
app.jinja_env.filters["money"] = format_money


def _form_to_state(form) -> CalculatorState:
    return CalculatorState.from_fields(
        principal=form.get("principal", "").strip(),
        years=form.get("years", "").strip(),
        rate=form.get("rate", "").strip(),
        currency=form.get("currency"),
        default_currency=app.config["DEFAULT_CURRENCY"],
    )


def _render_form(state: CalculatorState, status: int = 200):
    return (
        render_template(
            "index.html",
            state=state,
            currency=CURRENCIES[state.currency],
            currency_options=CURRENCIES,
            asset_version=app.config["ASSET_VERSION"],
        ),
        status,
    )


@app.route("/", methods=["GET", "POST"])
def index():
    state = CalculatorState(currency=app.config["DEFAULT_CURRENCY"])

    if request.method == "POST":
        action = request.form.get("action", "calculate")
        state = _form_to_state(request.form)
        if action == "reset":
            state = reset(state)
        else:
            state = calculate(state)

    return _render_form(state)


@app.post("/report")
def report():
    state = calculate(_form_to_state(request.form))
    if state.error:
        logger.info("Report requested with invalid inputs: %s", state.error)
        return _render_form(state, status=400)
    return export_report(state, auto_print=True)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print("Starting Installment Calculator web app...")
    app.run(
        host=os.environ.get("INSTALLMENT_CALC_HOST", "0.0.0.0"),
        port=int(os.environ.get("INSTALLMENT_CALC_PORT", "8710")),
        debug=os.environ.get("INSTALLMENT_CALC_DEBUG", "0") == "1",
    )
