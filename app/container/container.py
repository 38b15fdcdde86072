from pathlib import Path

from dependency_injector import containers, providers

from channels import SlackChannel, SlackUserDirectory
from commands import CommandDispatcher, CommandInterpreter
from notifier import Notifier
from roster import DynamoRosterStore, JsonFileRosterStore, RosterService, TeamRegistry
from scheduler import AnnouncementScheduler, APSchedulerTimers, WeeklyTrigger


CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"


class Container(containers.DeclarativeContainer):
    config = providers.Configuration(yaml_files=[str(CONFIG_PATH)])

    registry = providers.Singleton(TeamRegistry, teams=config.teams)

    roster_store = providers.Selector(
        config.storage.backend,
        json=providers.Singleton(JsonFileRosterStore, path=config.storage.path, registry=registry),
        dynamodb=providers.Singleton(DynamoRosterStore, table_name=config.storage.table_name, registry=registry),
    )

    roster_service = providers.Singleton(RosterService, store=roster_store, registry=registry)

    interpreter = providers.Singleton(
        CommandInterpreter,
        registry=registry,
        aliases=config.commands.aliases,
    )

    trigger = providers.Singleton(
        WeeklyTrigger.from_config,
        day=config.schedule.day,
        hour=config.schedule.hour.as_int(),
        minute=config.schedule.minute.as_int(),
        zone=config.schedule.timezone,
    )

    scheduler = providers.Singleton(AnnouncementScheduler, trigger=trigger, timers=providers.Singleton(APSchedulerTimers))

    slack_channel = providers.Singleton(
        SlackChannel,
        enabled=config.channels.slack.enabled.as_(lambda x: str(x).lower() == "true"),
        token=config.channels.slack.token,
    )

    user_directory = providers.Singleton(SlackUserDirectory, token=config.channels.slack.token)

    notifier = providers.Singleton(
        Notifier,
        channels=providers.List(slack_channel),
        max_retries=config.notifier.max_retries.as_int(),
    )

    dispatcher = providers.Singleton(
        CommandDispatcher,
        interpreter=interpreter,
        roster=roster_service,
        scheduler=scheduler,
        notifier=notifier,
        display_name=user_directory.provided.display_name,
        bot_name=config.bot_name,
    )
