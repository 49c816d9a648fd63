from helpers import Recorder, assert_json_request
from liquidity.models import IntegratorData, IntegratorResponse, MessageResponse, RegisterIntegratorData


def _registration() -> RegisterIntegratorData:
    return RegisterIntegratorData(
        float_currencies=["USD", "BTC"],
        first_name="Ada",
        last_name="Obi",
        country="NGA",
        business_name="Acme Cards",
        registration_number="RC-1029",
        business_address="1 Marina, Lagos",
        domain="acme.example",
        email="ops@acme.example",
        webhook_url="https://acme.example/hooks",
        contact_number="+2348000000000",
    )


def test_register_posts_camel_case_body(make_client):
    rec = Recorder(201, {"message": "Ok", "data": {"integratorId": "863494e2-40b3-44dc-8acf-5ee520097f75"}})
    client = make_client(rec)

    res = client.integrator.register(_registration())

    assert res == IntegratorResponse(
        message="Ok", data=IntegratorData(integrator_id="863494e2-40b3-44dc-8acf-5ee520097f75")
    )
    assert_json_request(rec.last, "POST", "/integrator/v1/register")
    body = rec.last_json()
    assert body["floatCurrencies"] == ["USD", "BTC"]
    assert body["businessName"] == "Acme Cards"
    assert body["webhookUrl"] == "https://acme.example/hooks"
    assert "float_currencies" not in body


def test_update_webhook(make_client):
    rec = Recorder(200, {"message": "Ok"})
    client = make_client(rec)

    res = client.integrator.update_webhook("https://acme.example/v2/hooks")

    assert res == MessageResponse(message="Ok")
    assert_json_request(rec.last, "PATCH", "/integrator/v1/webhook")
    assert rec.last_json() == {"webhook": "https://acme.example/v2/hooks"}
