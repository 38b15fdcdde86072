#!/usr/bin/env python
import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()
os.environ["POWERTOOLS_TRACE_DISABLED"] = "true"

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "app"))

from container import Container

parser = argparse.ArgumentParser(description="Dispatch one mention locally, e.g. \"@SupportRoster showNextRoster all\"")
parser.add_argument("text")
parser.add_argument("channel", nargs="?", default=os.environ.get("SLACK_CHANNEL", "local"))
args = parser.parse_args()

container = Container()
reply = container.dispatcher().handle_mention(args.text, args.channel)
print(reply)
