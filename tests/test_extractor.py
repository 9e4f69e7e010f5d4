import pytest

from conftest import DETAILS_HTML
from dvla.client import VIEW_VEHICLE_URL
from dvla.errors import DetailsNotFoundError, MalformedItemError
from dvla.extractor import fetch_details, parse_vehicle_record
from dvla.models import SessionTokenSet, VehicleRecord


def _page(body: str) -> str:
    return f"<html><body><main>{body}</main></body></html>"


def test_parse_vehicle_record_full_page():
    rec = parse_vehicle_record(DETAILS_HTML)
    assert rec == VehicleRecord(
        registration='AB12 CDE',
        make='FORD',
        taxed='Taxed',
        tax_due='1 March 2025',
        date_registered='March 2012',
        year_of_manufacture='2012',
        cylinder_capacity='1596 cc',
        co2_emissions='139 g/km',
        fuel_type='PETROL',
        export_marker='No',
        vehicle_status='Tax not due',
        colour='BLUE',
        wheelplan='2 AXLE RIGID BODY',
        weight='Not available',
    )


def test_parse_is_repeatable():
    assert parse_vehicle_record(DETAILS_HTML) == parse_vehicle_record(DETAILS_HTML)


def test_missing_heading_is_tolerated():
    rec = parse_vehicle_record(_page('<div class="related-links"><ul><li>Fuel type <strong>DIESEL</strong></li></ul></div>'))
    assert rec.registration == ''
    assert rec.taxed == ''
    assert rec.fuel_type == 'DIESEL'


def test_two_headings_leave_registration_empty():
    rec = parse_vehicle_record(_page('<h1>A</h1><h1>B</h1><div class="related-links"></div>'))
    assert rec.registration == ''


def test_tax_status_last_matching_container_wins():
    # duplicate tax panels: the later one overwrites the earlier
    body = '''
    <div class="column-half"><h2 class="heading-large">Taxed</h2>
      <p class="margin-bottom-1">Tax due: 1 March 2025</p>Incorrect tax status?</div>
    <div class="column-half"><h2 class="heading-large">Untaxed</h2>
      <p class="margin-bottom-1">Tax due: 1 April 2024</p>Incorrect tax status?</div>
    <div class="related-links"></div>
    '''
    rec = parse_vehicle_record(_page(body))
    assert rec.taxed == 'Untaxed'
    assert rec.tax_due == '1 April 2024'


def test_tax_panel_without_marker_is_ignored():
    body = '''
    <div class="column-half"><h2 class="heading-large">Taxed</h2></div>
    <div class="related-links"></div>
    '''
    assert parse_vehicle_record(_page(body)).taxed == ''


def test_missing_related_links_is_fatal():
    with pytest.raises(DetailsNotFoundError):
        parse_vehicle_record(_page('<h1>AB12 CDE</h1>'))


def test_missing_main_region_is_fatal():
    with pytest.raises(DetailsNotFoundError):
        parse_vehicle_record('<html><body><div class="related-links"></div></body></html>')


def test_item_with_two_values_aborts():
    body = '''
    <div class="related-links"><ul>
      <li>Vehicle make <strong>FORD</strong></li>
      <li>Fuel type <strong>PETROL</strong><strong>DIESEL</strong></li>
      <li>Vehicle colour <strong>BLUE</strong></li>
    </ul></div>
    '''
    with pytest.raises(MalformedItemError) as excinfo:
        parse_vehicle_record(_page(body))
    assert excinfo.value.index == 1
    assert excinfo.value.found == 2


def test_item_without_value_aborts():
    body = '<div class="related-links"><ul><li>Vehicle make</li></ul></div>'
    with pytest.raises(MalformedItemError):
        parse_vehicle_record(_page(body))


def test_unmatched_items_are_ignored():
    body = '''
    <div class="related-links"><ul>
      <li>Type approval <strong>M1</strong></li>
      <li>Wheelplan <strong>2 AXLE</strong></li>
    </ul></div>
    '''
    rec = parse_vehicle_record(_page(body))
    assert rec.wheelplan == '2 AXLE'
    assert rec.make == ''


def test_label_order_first_match_wins():
    # text holds two labels; "Vehicle make" precedes "Vehicle colour" in the table
    body = '''
    <div class="related-links"><ul>
      <li>Vehicle colour / Vehicle make <strong>RED</strong></li>
    </ul></div>
    '''
    rec = parse_vehicle_record(_page(body))
    assert rec.make == 'RED'
    assert rec.colour == ''


def test_items_order_insensitive():
    body = '''
    <div class="related-links"><ul>
      <li>Revenue weight <strong>1500kg</strong></li>
      <li>Vehicle make <strong>FORD</strong></li>
    </ul></div>
    '''
    rec = parse_vehicle_record(_page(body))
    assert rec.weight == '1500kg'
    assert rec.make == 'FORD'


def test_fetch_details_posts_tokens_with_confirmation(make_client):
    client, session = make_client({VIEW_VEHICLE_URL: DETAILS_HTML})
    tokens = SessionTokenSet('tok1', 'AB12CDE', 'FORD', 'BLUE')
    rec = fetch_details(tokens, client)
    assert rec.registration == 'AB12 CDE'
    assert session.calls[0].data == {
        'viewstate': 'tok1',
        'Vrm': 'AB12CDE',
        'Make': 'FORD',
        'Colour': 'BLUE',
        'Correct': 'True',
        'Continue': '',
    }


def test_only_first_related_links_container_is_read():
    body = '''
    <div class="related-links"><ul><li>Vehicle make <strong>FORD</strong></li></ul></div>
    <div class="related-links"><ul>
      <li>Fuel type <strong>PETROL</strong></li>
      <li>Vehicle make <strong>AUDI</strong></li>
    </ul></div>
    '''
    rec = parse_vehicle_record(_page(body))
    assert rec.make == 'FORD'
    assert rec.fuel_type == ''
