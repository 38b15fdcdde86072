from unittest.mock import MagicMock

from commands import CommandDispatcher
from container import Container
from roster import JsonFileRosterStore
from scheduler import SchedulePhase


class TestContainer:
    def test_defaults_from_config_yaml(self):
        container = Container()

        assert container.registry().teams == ("cr", "rum", "apm", "ss")
        assert container.trigger().weekday == 0
        assert container.trigger().hour == 9

    def test_dispatcher_wiring(self, tmp_path):
        container = Container()
        container.config.storage.backend.from_value("json")
        container.config.storage.path.from_value(str(tmp_path / "roster.json"))
        container.config.channels.slack.enabled.from_value("false")

        dispatcher = container.dispatcher()

        assert isinstance(dispatcher, CommandDispatcher)
        assert isinstance(container.roster_store(), JsonFileRosterStore)
        assert container.scheduler().state.phase is SchedulePhase.STOPPED

    def test_end_to_end_add_and_list(self, tmp_path):
        container = Container()
        container.config.storage.backend.from_value("json")
        container.config.storage.path.from_value(str(tmp_path / "roster.json"))
        container.user_directory.override(MagicMock(display_name=MagicMock(return_value="Alice")))
        container.notifier.override(MagicMock())

        dispatcher = container.dispatcher()
        dispatcher.handle_mention("<@UBOT> add <@UA> cr", "C1")
        reply = dispatcher.handle_mention("<@UBOT> list cr", "C1")

        assert reply == "*CR roster:*\n- *Alice - Current*"
        assert (tmp_path / "roster.json").exists()
