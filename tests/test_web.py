# tests/test_web.py

FORM = {"principal": "100000", "years": "1", "rate": "12", "currency": "USD"}


def test_index_renders_empty_form(web_client):
    resp = web_client.get("/")
    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Installment Calculator" in body
    assert '<option value="USD" selected>' in body
    assert "Export as PDF" not in body


def test_calculate_shows_results(web_client):
    resp = web_client.post("/", data={**FORM, "action": "calculate"})
    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "$8884.88" in body
    assert "$106618.55" in body
    assert "$6618.55" in body
    assert "Export as PDF" in body
    assert 'role="alert"' not in body


def test_currency_only_changes_symbol(web_client):
    body = web_client.post("/", data={**FORM, "currency": "GBP"}).get_data(as_text=True)
    assert "£8884.88" in body
    assert "Total Amount (GBP)" in body


def test_zero_rate_shows_error(web_client):
    resp = web_client.post("/", data={**FORM, "rate": "0", "action": "calculate"})
    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Annual Percentage Rate cannot be 0%" in body
    assert "Export as PDF" not in body


def test_missing_field_shows_error(web_client):
    body = web_client.post("/", data={**FORM, "years": ""}).get_data(as_text=True)
    assert "Please fill in all fields" in body
    assert "Monthly Payment</p>" not in body


def test_reset_clears_fields_and_keeps_currency(web_client):
    body = web_client.post("/", data={**FORM, "currency": "EUR", "action": "reset"}).get_data(as_text=True)
    assert 'value="100000"' not in body
    assert '<option value="EUR" selected>' in body
    assert "Export as PDF" not in body


def test_report_is_printable(web_client):
    resp = web_client.post("/report", data=FORM)
    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Monthly Installment Calculator Report" in body
    assert "window.print()" in body
    assert body.count('class="even"') + body.count('class="odd"') == 12


def test_report_with_invalid_inputs(web_client):
    resp = web_client.post("/report", data={**FORM, "principal": "-5"})
    assert resp.status_code == 400
    assert "Please enter valid positive numbers" in resp.get_data(as_text=True)


def test_overflowing_principal_shows_error(web_client):
    resp = web_client.post("/", data={**FORM, "principal": "9.9e999999", "years": "10"})
    assert resp.status_code == 200
    assert "Calculation error. Please check your inputs." in resp.get_data(as_text=True)


def test_term_over_a_century_shows_error(web_client):
    resp = web_client.post("/", data={**FORM, "years": "1e12"})
    assert resp.status_code == 200
    assert "Please enter valid positive numbers" in resp.get_data(as_text=True)
