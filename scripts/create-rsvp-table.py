#!/usr/bin/env python3
"""
Create the RSVP attendance table.

One partition per event (pk = EVENT#<event_id>), sort keys
RESPONDENT#<email> for respondent records and RESPONSE#<value> for
counters. On-demand billing.

Usage:
    python scripts/create-rsvp-table.py [--table event-rsvp-responses] [--region ap-northeast-1]
    python scripts/create-rsvp-table.py --endpoint-url http://localhost:8000  # DynamoDB Local
"""

import argparse
import json
import sys

import boto3
from botocore.exceptions import ClientError


def create_table(table_name: str, region: str, endpoint_url: str | None = None) -> dict:
    """Create the attendance table if it does not exist yet."""
    client = boto3.client("dynamodb", region_name=region, endpoint_url=endpoint_url)

    try:
        response = client.describe_table(TableName=table_name)
        print(f"Table already exists: {table_name} (status: {response['Table']['TableStatus']})")
        return response["Table"]
    except ClientError as e:
        if e.response["Error"]["Code"] != "ResourceNotFoundException":
            raise

    print(f"Creating table: {table_name}")
    client.create_table(
        TableName=table_name,
        AttributeDefinitions=[
            {"AttributeName": "pk", "AttributeType": "S"},
            {"AttributeName": "sk", "AttributeType": "S"},
        ],
        KeySchema=[
            {"AttributeName": "pk", "KeyType": "HASH"},
            {"AttributeName": "sk", "KeyType": "RANGE"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )

    print("Waiting for ACTIVE status...")
    client.get_waiter("table_exists").wait(
        TableName=table_name,
        WaiterConfig={"Delay": 3, "MaxAttempts": 60},
    )
    return client.describe_table(TableName=table_name)["Table"]


def main():
    parser = argparse.ArgumentParser(description="Create the RSVP attendance table")
    parser.add_argument(
        "--table",
        default="event-rsvp-responses",
        help="Table name (default: event-rsvp-responses)",
    )
    parser.add_argument(
        "--region",
        default="ap-northeast-1",
        help="AWS region (default: ap-northeast-1)",
    )
    parser.add_argument(
        "--endpoint-url",
        default=None,
        help="DynamoDB endpoint override, e.g. DynamoDB Local",
    )
    args = parser.parse_args()

    try:
        table = create_table(args.table, args.region, args.endpoint_url)

        print()
        print("=== Summary ===")
        print(json.dumps(
            {
                "TableName": table["TableName"],
                "TableStatus": table["TableStatus"],
                "TableArn": table.get("TableArn"),
            },
            indent=2,
            default=str,
        ))

    except ClientError as e:
        print(f"AWS Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
