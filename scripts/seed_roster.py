#!/usr/bin/env python
import argparse
import json

import boto3


def seed_roster(table_name: str, roster_file: str):
    dynamodb = boto3.resource("dynamodb")
    table = dynamodb.Table(table_name)

    with open(roster_file, encoding="utf-8") as f:
        document = json.load(f)

    with table.batch_writer() as batch:
        for team, data in document.items():
            item = {
                "PK": "ROSTER",
                "SK": f"TEAM#{team}",
                "members": [{"name": name, "id": user_id} for name, user_id in data.get("members", [])],
                "current_tick": data.get("currentTick", 0),
            }
            batch.put_item(Item=item)
            print(f"Added: {item['PK']} / {item['SK']} ({len(item['members'])} members)")

    print("Done!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Copy a roster.json file into the DynamoDB roster table")
    parser.add_argument("--table", required=True)
    parser.add_argument("--roster", default="roster.json")
    args = parser.parse_args()
    seed_roster(args.table, args.roster)
