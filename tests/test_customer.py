from patterndemos.customer import Customer, main
from patterndemos.staff import build_chain


def test_ask_for_help_returns_interpretation(capsys):
    result = Customer("Bob").ask_for_help("Where can I find a nice shirt?", build_chain())
    assert result == "clothing:product"
    out = capsys.readouterr().out
    assert 'Bob says: "Where can I find a nice shirt?"' in out
    assert "Interpreted as: clothing:product" in out
    assert "=== CLOTHING DEPARTMENT ===" in out


def test_ambiguous_request_goes_to_service(capsys):
    result = Customer("Alice").ask_for_help("Can you help me find something?", build_chain())
    assert result == "service:inquiry"
    assert "=== CUSTOMER SERVICE ===" in capsys.readouterr().out


def test_details_are_the_original_words(capsys):
    request = "I'm looking for fresh bread and milk"
    Customer("Charlie").ask_for_help(request, build_chain())
    assert f"Food specialist: I can help with {request}" in capsys.readouterr().out


def test_main_runs_all_scenarios(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "WELCOME TO THE DEPARTMENT STORE" in out
    assert out.count("Interpreted as:") == 5
    assert "THANK YOU FOR SHOPPING WITH US!" in out