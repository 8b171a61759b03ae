import pytest

from enigma_engine.alphabet import ALPHABET, index_of
from enigma_engine.catalog import REFLECTOR_TYPES, ROTOR_TYPES, reflector_type, rotor_type
from enigma_engine.rotor import Reflector, Rotor


def test_forward_at_zero_follows_wiring() -> None:
    rotor = Rotor(rotor_type(1))
    assert rotor.forward(index_of("A")) == index_of("E")
    assert rotor.reverse(index_of("E")) == index_of("A")


def test_forward_with_offset() -> None:
    # Rotor III at B: A enters contact B, wired to D, leaves one step back as C.
    rotor = Rotor(rotor_type(3), offset=1)
    assert rotor.forward(0) == index_of("C")


@pytest.mark.parametrize("rtype", ROTOR_TYPES, ids=lambda r: r.name)
def test_reverse_inverts_forward(rtype) -> None:
    for offset in range(26):
        rotor = Rotor(rtype, offset)
        for i in range(26):
            assert rotor.reverse(rotor.forward(i)) == i


def test_step_sets_turn_pending_on_turnover() -> None:
    rotor = Rotor(rotor_type(1), offset=index_of("Q"))
    assert not rotor.turn_pending
    assert rotor.step() is True
    assert rotor.letter == "R"
    assert rotor.turn_pending
    assert rotor.step() is False
    # The flag is consumed by the machine, not by the rotor.
    assert rotor.turn_pending


def test_step_wraps() -> None:
    rotor = Rotor(rotor_type(5), offset=25)
    assert rotor.step() is True  # Z -> A is rotor V's turnover
    assert rotor.offset == 0


@pytest.mark.parametrize("rtype", ROTOR_TYPES, ids=lambda r: r.name)
@pytest.mark.parametrize("start", [0, 7, 25])
def test_full_revolution(rtype, start: int) -> None:
    rotor = Rotor(rtype, start)
    events = 0
    for _ in range(26):
        if rotor.step():
            events += 1
        rotor.turn_pending = False
    assert rotor.offset == start
    assert events == len(rtype.turnover)


def test_at_notch() -> None:
    rotor = Rotor(rotor_type(2), offset=index_of("E"))
    assert rotor.at_notch()
    rotor.step()
    assert not rotor.at_notch()
    assert Rotor(rotor_type(6), offset=index_of("M")).at_notch()


@pytest.mark.parametrize("rtype", REFLECTOR_TYPES, ids=lambda r: r.name)
def test_reflect_has_no_fixed_point(rtype) -> None:
    refl = Reflector(rtype)
    for i in range(26):
        out = refl.reflect(i)
        assert out != ALPHABET[i]
        assert refl.reflect(index_of(out)) == ALPHABET[i]


def test_reflector_b() -> None:
    assert Reflector(reflector_type(1)).reflect(0) == "Y"
