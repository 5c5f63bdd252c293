from bedrock_tracker.core.merger import MergeOutcome, merge_version
from bedrock_tracker.models.ledger import Channel, Ledger
from tests.conftest import make_url


def test_merge_adds_new_version_to_its_section(populated_ledger):
    before = populated_ledger.model_copy(deep=True)
    win, linux = make_url("win", "1.21.50.3"), make_url("linux", "1.21.50.3")

    outcome = merge_version(populated_ledger, Channel.REGULAR, "1.21.50", win, linux)

    assert outcome is MergeOutcome.ADDED
    record = populated_ledger.release["1.21.50"]
    assert record.windows.url == win
    assert record.linux.url == linux
    assert len(populated_ledger.release) == len(before.release) + 1
    assert populated_ledger.release["1.21.44"] == before.release["1.21.44"]
    assert populated_ledger.preview == before.preview


def test_merge_routes_preview_to_preview_section():
    ledger = Ledger.empty()
    merge_version(ledger, Channel.PREVIEW, "1.21.60", "w", "l")
    assert list(ledger.preview) == ["1.21.60"]
    assert ledger.release == {}


def test_merge_is_idempotent():
    ledger = Ledger.empty()
    win, linux = make_url("win", "1.21.50.3"), make_url("linux", "1.21.50.3")

    first = merge_version(ledger, Channel.REGULAR, "1.21.50", win, linux)
    snapshot = ledger.to_json()
    second = merge_version(ledger, Channel.REGULAR, "1.21.50", win, linux)

    assert first is MergeOutcome.ADDED
    assert second is MergeOutcome.ALREADY_KNOWN
    assert ledger.to_json() == snapshot


def test_merge_never_overwrites_known_version(populated_ledger):
    original = populated_ledger.release["1.21.44"].model_copy(deep=True)

    outcome = merge_version(
        populated_ledger,
        Channel.REGULAR,
        "1.21.44",
        "https://mirror/bedrock-server-1.21.44.01.zip",
        "https://mirror/bedrock-server-1.21.44.01.zip",
    )

    assert outcome is MergeOutcome.ALREADY_KNOWN
    assert populated_ledger.release["1.21.44"] == original


def test_same_version_may_exist_in_both_channels():
    ledger = Ledger.empty()
    merge_version(ledger, Channel.REGULAR, "1.21.60", "rw", "rl")
    outcome = merge_version(ledger, Channel.PREVIEW, "1.21.60", "pw", "pl")
    assert outcome is MergeOutcome.ADDED
    assert ledger.release["1.21.60"].windows.url == "rw"
    assert ledger.preview["1.21.60"].windows.url == "pw"
