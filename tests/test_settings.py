import os
import sys

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from shipping_response import ShippingResponse
from shipping_response.config.settings import DEFAULT_CARRIERS, Settings, get_settings, load_carriers


CART = {"_embedded": {"fx:shipment": {"total_handling_fee": 0, "total_flat_rate_shipping": 0}}}


def test_bundled_carriers():
    settings = get_settings()
    assert settings.carriers == ('fedex', 'usps', 'ups')
    assert settings.custom_id_offset == 10000


def test_missing_carriers_file_uses_defaults(tmp_path):
    assert load_carriers(tmp_path / "nope.csv") == DEFAULT_CARRIERS


def test_carriers_csv_filters_inactive(tmp_path):
    path = tmp_path / "carriers.csv"
    path.write_text("carrier,active\n DHL ,true\nOnTrac,false\nfedex,\ndhl,true\n", encoding="utf-8")
    assert load_carriers(path) == ('dhl', 'fedex')


def test_custom_carriers_drive_text_selectors(tmp_path):
    path = tmp_path / "carriers.csv"
    path.write_text("carrier,active\ndhl,true\n", encoding="utf-8")
    settings = Settings.load(carriers_csv=path)

    response = ShippingResponse(CART, settings=settings)
    response.add(1, 10.0, "DHL", "Express Worldwide")
    response.add(2, 12.0, "FedEx", "International Priority")
    response.hide("dhl express")

    visible = [r["service_id"] for r in response.output(False)["data"]["shipping_results"]]
    assert visible == [10002]
