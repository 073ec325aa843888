import pytest

from intouch.contracts import (
    CashinResponse,
    CashoutResponse,
    MoovCICashoutRequest,
    OMCICashinRequest,
    OMCICashoutRequest,
    TransactionStatus,
    WaveCICashoutRequest,
    validate_request,
    validate_response,
)
from intouch.contracts.common import BalanceResponse
from intouch.errors import RequestValidationError, ResponseValidationError


def _cashin(**overrides):
    payload = {
        "service_id": "CASHINOMCIPART",
        "recipient_phone_number": "76537327",
        "amount": 500,
        "partner_id": "CI8724",
        "partner_transaction_id": "T1",
        "login_api": "0708517414",
        "password_api": "XXXX",
        "call_back_url": "https://example.com/callback",
    }
    payload.update(overrides)
    return payload


def _infos(**overrides):
    infos = {
        "recipientEmail": "awa@example.com",
        "recipientFirstName": "Awa",
        "recipientLastName": "Kone",
        "destinataire": "0102030405",
    }
    infos.update(overrides)
    return infos


def _cashout(service_code, infos, **overrides):
    payload = {
        "idFromClient": "C-1",
        "amount": 1500,
        "callback": "https://example.com/cb",
        "recipientNumber": "0102030405",
        "additionnalInfos": infos,
        "serviceCode": service_code,
    }
    payload.update(overrides)
    return payload


def test_valid_cashin_request_keeps_values():
    request = validate_request(OMCICashinRequest, _cashin())

    assert request.model_dump(mode="json") == _cashin()
    assert isinstance(request.amount, int)


def test_cashin_rejects_wrong_service_literal():
    with pytest.raises(RequestValidationError) as exc_info:
        validate_request(OMCICashinRequest, _cashin(service_id="CASHINMTNPART"))

    assert "service_id" in exc_info.value.field_errors


@pytest.mark.parametrize("amount", [0, -10, -0.5])
def test_cashin_rejects_non_positive_amount(amount):
    with pytest.raises(RequestValidationError) as exc_info:
        validate_request(OMCICashinRequest, _cashin(amount=amount))

    assert exc_info.value.field_errors["amount"].endswith("must be greater than 0")


@pytest.mark.parametrize("amount", ["500", True, None])
def test_cashin_rejects_non_numeric_amount(amount):
    with pytest.raises(RequestValidationError) as exc_info:
        validate_request(OMCICashinRequest, _cashin(amount=amount))

    assert "amount" in exc_info.value.field_errors


def test_cashin_rejects_number_where_string_expected():
    with pytest.raises(RequestValidationError) as exc_info:
        validate_request(OMCICashinRequest, _cashin(recipient_phone_number=76537327))

    assert "recipient_phone_number" in exc_info.value.field_errors


@pytest.mark.parametrize("url", ["not-a-url", "ftp://example.com/cb", "https://"])
def test_cashin_rejects_malformed_callback(url):
    with pytest.raises(RequestValidationError) as exc_info:
        validate_request(OMCICashinRequest, _cashin(call_back_url=url))

    assert "call_back_url" in exc_info.value.field_errors


def test_cashin_reports_every_missing_field():
    payload = _cashin()
    del payload["partner_transaction_id"]
    del payload["recipient_phone_number"]

    with pytest.raises(RequestValidationError) as exc_info:
        validate_request(OMCICashinRequest, payload, operation="cashin.OM_CI")

    err = exc_info.value
    assert set(err.field_errors) == {"partner_transaction_id", "recipient_phone_number"}
    assert err.operation == "cashin.OM_CI"
    assert "cashin.OM_CI" in str(err)


def test_cashin_rejects_unknown_fields():
    with pytest.raises(RequestValidationError) as exc_info:
        validate_request(OMCICashinRequest, _cashin(callback_url="https://example.com"))

    assert "callback_url" in exc_info.value.field_errors


def test_om_cashout_requires_otp():
    with pytest.raises(RequestValidationError) as exc_info:
        validate_request(OMCICashoutRequest, _cashout("PAIEMENTMARCHANDOMPAYCIDIRECT", _infos()))

    assert "additionnalInfos.otp" in exc_info.value.field_errors

    request = validate_request(
        OMCICashoutRequest, _cashout("PAIEMENTMARCHANDOMPAYCIDIRECT", _infos(otp="1234"))
    )
    assert request.additionnalInfos.otp == "1234"


def test_cashout_rejects_bad_recipient_email():
    with pytest.raises(RequestValidationError) as exc_info:
        validate_request(
            MoovCICashoutRequest,
            _cashout("PAIEMENTMARCHAND_MOOV_CI", _infos(recipientEmail="awa.example.com")),
        )

    assert "additionnalInfos.recipientEmail" in exc_info.value.field_errors


def test_moov_cashout_rejects_operator_specific_extras():
    with pytest.raises(RequestValidationError) as exc_info:
        validate_request(MoovCICashoutRequest, _cashout("PAIEMENTMARCHAND_MOOV_CI", _infos(otp="1234")))

    assert "additionnalInfos.otp" in exc_info.value.field_errors


def test_wave_cashout_requires_partner_name_and_redirect_urls():
    with pytest.raises(RequestValidationError) as exc_info:
        validate_request(WaveCICashoutRequest, _cashout("CI_PAIEMENTWAVE_TP", _infos()))

    assert {
        "additionnalInfos.partner_name",
        "additionnalInfos.return_url",
        "additionnalInfos.cancel_url",
    } <= set(exc_info.value.field_errors)


def test_status_only_response_round_trips():
    response = validate_response(CashinResponse, {"status": "SUCCESSFUL"})

    assert response.status is TransactionStatus.SUCCESSFUL
    assert response.model_dump(mode="json", exclude_unset=True) == {"status": "SUCCESSFUL"}


def test_full_response_is_returned_field_for_field():
    body = {
        "status": "INITIATED",
        "idFromClient": "C-1",
        "idFromGU": "GU-99",
        "amount": 1500,
        "fees": 15.5,
        "serviceCode": "CI_PAIEMENTWAVE_TP",
        "recipientNumber": "0102030405",
        "dateTime": 1718000000000,
        "numTransaction": "N-1",
        "payment_url": "https://pay.wave.com/c/abc",
        "gatewayExtra": {"kept": True},
    }

    response = validate_response(CashoutResponse, body)

    assert response.model_dump(mode="json", exclude_unset=True) == body


def test_error_envelope_with_message_only_is_accepted():
    response = validate_response(CashinResponse, {"message": "Solde insuffisant"})

    assert response.status is None
    assert response.message == "Solde insuffisant"


def test_unknown_status_raises_response_validation_error():
    with pytest.raises(ResponseValidationError) as exc_info:
        validate_response(CashinResponse, {"status": "FAILED"}, operation="cashin.OM_CI")

    assert "status" in exc_info.value.field_errors
    assert exc_info.value.payload == {"status": "FAILED"}


def test_service_code_must_belong_to_operation_family():
    with pytest.raises(ResponseValidationError) as exc_info:
        validate_response(CashinResponse, {"status": "SUCCESSFUL", "serviceCode": "CI_PAIEMENTWAVE_TP"})

    assert "serviceCode" in exc_info.value.field_errors


def test_non_object_response_is_rejected():
    with pytest.raises(ResponseValidationError) as exc_info:
        validate_response(CashoutResponse, ["SUCCESSFUL"])

    assert exc_info.value.field_errors == {"__root__": "expected a JSON object"}


def test_balance_response_checks_known_field_types_only():
    response = validate_response(BalanceResponse, {"balance": 125000, "currency": "XOF"})
    assert response.balance == 125000
    assert response.model_extra == {"currency": "XOF"}

    with pytest.raises(ResponseValidationError):
        validate_response(BalanceResponse, {"balance": "125000"})


@pytest.mark.parametrize("amount", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_amounts_are_rejected(amount):
    with pytest.raises(RequestValidationError) as exc_info:
        validate_request(OMCICashinRequest, _cashin(amount=amount))

    assert "amount" in exc_info.value.field_errors


@pytest.mark.parametrize("field", ["amount", "fees", "dateTime"])
def test_non_finite_response_numbers_are_rejected(field):
    with pytest.raises(ResponseValidationError) as exc_info:
        validate_response(CashoutResponse, {"status": "SUCCESSFUL", field: float("nan")})

    assert exc_info.value.field_errors[field].endswith("must be a finite number")
