#!/usr/bin/env python3
"""Demonstration of building and running a query.

This script shows how to:
1. Declare typed variables
2. Build a query with fragments and directives
3. Execute it (only when DESKPRO_URL is set)

Set DESKPRO_URL, DESKPRO_PERSON_ID and DESKPRO_TOKEN to run it against a
real instance; otherwise the rendered document is printed and nothing is sent.
"""

import logging
import os

from deskpro_gql import (
    Client,
    GraphQLError,
    HttpxTransport,
    boolean_type,
    id_type,
)


def main():
    logging.basicConfig(level=logging.DEBUG if os.environ.get("DEBUG") else logging.INFO)

    url = os.environ.get("DESKPRO_URL", "https://support.example.com")
    with HttpxTransport(timeout=10.0) as transport:
        client = Client(url, transport)
        if os.environ.get("DESKPRO_TOKEN"):
            client.set_auth_token(os.environ["DESKPRO_PERSON_ID"], os.environ["DESKPRO_TOKEN"])

        print("=== Query Builder Demo ===\n")
        query = client.create_query("GetNews", {
            "$id": id_type(nullable=False),
            "$withCategories": boolean_type(nullable=False),
        })
        news_fields = query.fragment("news_fields", "News", ["id", "title", "content"])
        query.field("news", "id: $id", [
            news_fields,
            {"categories": query.include_if("$withCategories", ["id", "title"])},
        ])
        query.field("related: news", "id: 1", news_fields)

        print(query)
        print()

        if "DESKPRO_URL" not in os.environ:
            print("DESKPRO_URL not set, not sending the query.")
            return

        try:
            data = query.execute({"id": 1, "withCategories": True})
        except GraphQLError as e:
            print(f"{type(e).__name__}: {e.message}")
            return
        print(data)


if __name__ == "__main__":
    main()
