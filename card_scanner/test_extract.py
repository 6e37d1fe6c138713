"""
Tests for card segmentation and field extraction.
"""

from .extract import (
    split_cards, extract_fields, extract_contacts,
    find_email, find_phone, find_website,
)


BOGNER_CARD = "Bogner & Partners\nAndrej Mikula\nPartner\nandrej@bogner.com\n12 Hauptstr, Munich"

DSA_CARD = (
    "Digital Skills Accelerator\n"
    "Eva Lena Richter\n"
    "Project Management\n"
    "eva@dsa.africa\n"
    "+49 221 555 1234\n"
)


def test_bogner_card_end_to_end():
    contacts = extract_contacts(BOGNER_CARD)

    assert len(contacts) == 1
    contact = contacts[0]
    assert contact.name == "Andrej Mikula"
    assert contact.title == "Partner"
    assert contact.company == "Bogner & Partners"
    assert contact.email == "andrej@bogner.com"
    assert "12 Hauptstr, Munich" in contact.address
    assert contact.extracted_text == BOGNER_CARD


def test_two_cards_on_one_page_keep_page_order():
    contacts = extract_contacts(DSA_CARD + BOGNER_CARD)

    assert [c.name for c in contacts] == ["Eva Lena Richter", "Andrej Mikula"]
    eva = contacts[0]
    assert eva.company == "Digital Skills Accelerator Africa"
    assert eva.title == "Project Management"
    assert eva.email == "eva@dsa.africa"
    assert eva.phone == "+49 221 555 1234"
    assert eva.website == "dsa.africa"
    assert eva.address == ""
    assert eva.extracted_text == DSA_CARD.strip()


def test_every_record_gets_its_own_id():
    first = extract_contacts(BOGNER_CARD)[0]
    second = extract_contacts(BOGNER_CARD)[0]

    assert first.id and second.id
    assert first.id != second.id


def test_text_without_delimiter_yields_nothing():
    text = "Jane Doe\nSales Partner\njane@example.com\n+1 555 123 4567"

    assert split_cards(text) == []
    assert extract_contacts(text) == []


def test_delimiter_stays_with_following_segment():
    segments = split_cards("Bogner & Partners\na@b.com\nDigital Skills Accelerator\nc@d.com")

    assert len(segments) == 2
    assert segments[0].startswith("Bogner & Partners")
    assert segments[1].startswith("Digital Skills Accelerator")


def test_blank_segments_are_dropped():
    assert split_cards("   \nBogner & Partners\nAndrej Mikula") == ["Bogner & Partners\nAndrej Mikula"]


def test_segment_without_name_or_email_is_discarded():
    assert extract_contacts("Bogner & Partners\nReception\n+49 89 123 4567") == []


def test_name_alone_is_enough():
    contacts = extract_contacts("Bogner & Partners\nAndrej Mikula")

    assert len(contacts) == 1
    assert contacts[0].email == ""


def test_email_alone_is_enough():
    contacts = extract_contacts("Digital Skills Accelerator\ninfo@dsa.africa")

    assert len(contacts) == 1
    assert contacts[0].name == ""
    assert contacts[0].email == "info@dsa.africa"


def test_email_is_first_match_verbatim():
    segment = "Bogner & Partners\nMail: a.b-c@mail.example.org or second@x.com"

    assert find_email(segment) == "a.b-c@mail.example.org"
    assert extract_contacts(segment)[0].email == "a.b-c@mail.example.org"


def test_name_match_is_case_insensitive_and_trimmed():
    fields = extract_fields("Bogner & Partners\n   ANDREJ MIKULA   \n")

    assert fields['name'] == "ANDREJ MIKULA"


def test_title_does_not_match_company_line():
    fields = extract_fields("Bogner & Partners\nAndrej Mikula")

    assert fields['title'] == ""


def test_address_lines_are_joined():
    fields = extract_fields(
        "Digital Skills Accelerator\nEva Lena Richter\n12 Main Street\n50667 Cologne\n"
    )

    assert fields['address'] == "12 Main Street, 50667 Cologne"


def test_missing_fields_are_empty_strings():
    fields = extract_fields("Bogner & Partners")

    assert fields == {
        'name': '',
        'title': '',
        'company': 'Bogner & Partners',
        'email': '',
        'phone': '',
        'website': '',
        'address': '',
    }


def test_phone_formats():
    assert find_phone("Tel (555) 123-4567") == "(555) 123-4567"
    assert find_phone("Tel 555.123.4567") == "555.123.4567"
    assert find_phone("Tel +1-555-123-4567") == "+1-555-123-4567"
    assert find_phone("Tel 12345") == ""


def test_website_prefers_first_domain_like_token():
    assert find_website("Visit www.bogner-partners.de today") == "www.bogner-partners.de"
    assert find_website("no domain here") == ""
