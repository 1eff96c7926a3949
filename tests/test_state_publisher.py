from feature_movies.applications.services.state_publisher import StatePublisher


class TestStatePublisher:
    def test_publish_reaches_all_listeners(self, mock_logger):
        publisher = StatePublisher(mock_logger)
        first, second = [], []
        publisher.subscribe(first.append)
        publisher.subscribe(second.append)

        publisher.publish("ready")

        assert first == ["ready"]
        assert second == ["ready"]

    def test_failing_listener_is_logged_and_skipped(self, mock_logger):
        publisher = StatePublisher(mock_logger)
        received = []

        def broken(state):
            raise RuntimeError("listener bug")

        publisher.subscribe(broken)
        publisher.subscribe(received.append)

        publisher.publish("ready")

        assert received == ["ready"]
        mock_logger.exception.assert_called_once()

    def test_unsubscribe_is_idempotent(self, mock_logger):
        publisher = StatePublisher(mock_logger)
        received = []
        unsubscribe = publisher.subscribe(received.append)

        unsubscribe()
        unsubscribe()
        publisher.publish("ready")

        assert received == []
        mock_logger.debug.assert_any_call("Listener unsubscribed, 0 active")

    def test_subscribe_logs_active_listeners(self, mock_logger):
        publisher = StatePublisher(mock_logger)

        publisher.subscribe(lambda state: None)
        publisher.subscribe(lambda state: None)

        mock_logger.debug.assert_called_with("Listener subscribed, 2 active")
