import pytest

from src.service.cinema.domain.cinema_errors import SeatMapFormatError, UnknownSeatError
from src.service.cinema.domain.entity.seat_map import SeatMap
from src.service.cinema.domain.value_object.seat import Seat, SeatLayout


class TestSeatLayout:
    def test_default_layout_is_five_rows_of_ten(self) -> None:
        layout = SeatLayout()

        assert layout.seat_count == 50
        assert layout.row_count == 5

    @pytest.mark.parametrize(
        'index,expected',
        [(0, 'A1'), (9, 'A10'), (10, 'B1'), (37, 'D8'), (49, 'E10')],
    )
    def test_seat_for_index(self, index: int, expected: str) -> None:
        assert SeatLayout().seat_for_index(index).code == expected

    def test_index_of_rejects_seats_outside_the_room(self) -> None:
        layout = SeatLayout()

        assert layout.index_of('A', 1) == 0
        assert layout.index_of('E', 10) == 49
        assert layout.index_of('F', 1) is None
        assert layout.index_of('A', 11) is None
        assert layout.index_of('A', 0) is None

    def test_layout_cannot_exceed_alphabet(self) -> None:
        with pytest.raises(ValueError):
            SeatLayout(seat_count=270, seats_per_row=10)


class TestSeat:
    def test_equality_ignores_booked_flag(self) -> None:
        assert Seat('A', 1, booked=True) == Seat('A', 1, booked=False)
        assert hash(Seat('A', 1, booked=True)) == hash(Seat('A', 1))
        assert Seat('A', 1) != Seat('A', 2)

    def test_clone_is_independent(self) -> None:
        seat = Seat('C', 4)
        clone = seat.clone()

        clone.booked = True

        assert seat.booked is False
        assert clone == seat

    def test_parse_round_trips_the_code(self) -> None:
        assert Seat.parse('d10') == Seat('D', 10)
        assert str(Seat.parse('A8')) == 'A8'

    @pytest.mark.parametrize('code', ['', '1A', 'AA1', 'A', 'A1234'])
    def test_parse_rejects_malformed_codes(self, code: str) -> None:
        with pytest.raises(UnknownSeatError):
            Seat.parse(code)


class TestSeatMapCodec:
    def test_decode_then_encode_is_identity(self, layout: SeatLayout) -> None:
        bitstring = '1' + '0' * 36 + '1' + '0' * 11 + '1'

        assert SeatMap.decode(layout, bitstring).encode() == bitstring

    def test_decoded_flags_follow_layout_order(self, layout: SeatLayout) -> None:
        bitstring = '0' * 37 + '1' + '0' * 12

        seat_map = SeatMap.decode(layout, bitstring)

        assert seat_map.seat_at('D', 8).booked is True
        assert [seat.code for seat in seat_map.booked_seats()] == ['D8']

    def test_all_free_map_counts(self, layout: SeatLayout) -> None:
        seat_map = SeatMap.decode(layout, '0' * 50)

        assert seat_map.count_free() == 50
        assert seat_map.count_booked() == 0
        assert seat_map.total() == 50
        assert seat_map == SeatMap.empty(layout)

    @pytest.mark.parametrize('length', [0, 49, 51])
    def test_decode_rejects_wrong_length(self, layout: SeatLayout, length: int) -> None:
        with pytest.raises(SeatMapFormatError):
            SeatMap.decode(layout, '0' * length)

    def test_decode_rejects_foreign_characters(self, layout: SeatLayout) -> None:
        with pytest.raises(SeatMapFormatError):
            SeatMap.decode(layout, '0' * 49 + 'x')


class TestSeatMapMutation:
    def test_set_booked_mutates_in_place(self, layout: SeatLayout) -> None:
        seat_map = SeatMap.empty(layout)

        seat_map.set_booked(Seat('B', 3), True)

        assert seat_map.seat_at('B', 3).booked is True
        assert seat_map.count_booked() == 1
        assert seat_map.encode()[12] == '1'

    def test_set_booked_outside_layout_raises(self, layout: SeatLayout) -> None:
        seat_map = SeatMap.empty(layout)

        with pytest.raises(UnknownSeatError):
            seat_map.set_booked(Seat('Z', 1), True)

    def test_seat_at_outside_layout_is_none(self, layout: SeatLayout) -> None:
        assert SeatMap.empty(layout).seat_at('F', 1) is None

    def test_clone_is_deep(self, layout: SeatLayout) -> None:
        original = SeatMap.empty(layout)
        clone = original.clone()

        clone.set_booked(Seat('A', 1), True)

        assert original.count_booked() == 0
        assert clone.count_booked() == 1
