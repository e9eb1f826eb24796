import argparse
import sys
from typing import List

import pandas as pd
import requests

COLUMNS = ["title", "director", "year", "duration_minutes", "genre"]


def read_movies(path: str) -> List[dict]:
    df = pd.read_csv(path, usecols=COLUMNS)
    df = df.dropna(subset=["title", "year"])
    df["year"] = df["year"].astype(int)
    df["duration_minutes"] = df["duration_minutes"].fillna(0).astype(int)
    df["director"] = df["director"].fillna("")
    df["genre"] = df["genre"].fillna("")
    return df[COLUMNS].to_dict(orient="records")


def insert_movies(base_url: str, movies: List[dict], dry_run: bool, limit: int, timeout: float) -> int:
    url = base_url.rstrip("/") + "/movies/"
    count = 0
    for payload in movies:
        if limit and count >= limit:
            break
        if dry_run:
            count += 1
            continue
        try:
            r = requests.post(url, json=payload, timeout=timeout)
            # 409 means the (title, year) pair is already stored
            if r.status_code in (201, 409):
                count += 1
                continue
            print(f"Rejected movie {payload['title']!r}: {r.status_code} {r.text}", file=sys.stderr)
        except requests.RequestException as e:
            print(f"Failed to insert movie {payload['title']!r}: {e}", file=sys.stderr)
    return count


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the movie catalog from a CSV file")
    parser.add_argument("--base_url", type=str, default="http://localhost:8000")
    parser.add_argument("--movies_path", type=str, default="data/movies.csv")
    parser.add_argument("--limit", type=int, default=0)
    parser.add_argument("--timeout", type=float, default=10.0)
    parser.add_argument("--dry_run", action="store_true")
    args = parser.parse_args()
    try:
        rows = read_movies(args.movies_path)
    except (OSError, ValueError) as e:
        print(f"Failed to read movies: {e}", file=sys.stderr)
        sys.exit(1)
    inserted = insert_movies(args.base_url, rows, args.dry_run, args.limit, args.timeout)
    print(f"Processed {inserted} of {len(rows)} movies")


if __name__ == "__main__":
    main()
