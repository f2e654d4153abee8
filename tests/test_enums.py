from notification_dispatch.enums import Channel, DeliveryState, Priority


class TestChannel:
    def test_values(self):
        assert Channel.EMAIL == "email"
        assert Channel.SMS == "sms"
        assert Channel.PUSH_NOTIFICATION == "push"

    def test_members_count(self):
        assert len(Channel) == 3


class TestPriority:
    def test_weights(self):
        assert Priority.URGENT.weight == 0
        assert Priority.HIGH.weight == 1
        assert Priority.MEDIUM.weight == 2
        assert Priority.LOW.weight == 3

    def test_bypass_throttling(self):
        assert Priority.URGENT.bypass_throttling is True
        assert Priority.HIGH.bypass_throttling is True
        assert Priority.MEDIUM.bypass_throttling is False
        assert Priority.LOW.bypass_throttling is False

    def test_sorting_by_weight(self):
        ordered = sorted(Priority, key=lambda p: p.weight, reverse=True)
        assert ordered[0] == Priority.LOW
        assert ordered[-1] == Priority.URGENT


class TestDeliveryState:
    def test_values(self):
        assert DeliveryState.DELIVERED == "delivered"
        assert DeliveryState.EXHAUSTED == "exhausted"
        assert DeliveryState.ABORTED == "aborted"
        assert DeliveryState.UNROUTABLE == "unroutable"
