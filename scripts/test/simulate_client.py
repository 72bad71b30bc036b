# scripts/test/simulate_client.py
"""Drive a running backend the way the mobile client does: log in / register, add a car, list cars."""

import argparse
import requests


def login(base_url, email, password, name=None):
    body = {"email": email, "password": password}
    if name:
        body["name"] = name
    resp = requests.post(f"{base_url}/api/auth/login", json=body, timeout=10)
    print(f"login {email} → HTTP {resp.status_code}: {resp.json()}")
    resp.raise_for_status()
    return resp.json()["user"]


def add_car(base_url, user_id, make, model, year):
    resp = requests.post(f"{base_url}/api/cars",
                         json={"make": make, "model": model, "year": year, "userId": user_id},
                         timeout=10)
    print(f"add car {year} {make} {model} → HTTP {resp.status_code}: {resp.json()}")
    resp.raise_for_status()
    return resp.json()


def list_cars(base_url, user_id):
    resp = requests.get(f"{base_url}/api/cars/{user_id}", timeout=10)
    print(f"list cars → HTTP {resp.status_code}: {len(resp.json())} car(s)")
    resp.raise_for_status()
    return resp.json()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Exercise the Digital Mechanic API end to end")
    parser.add_argument("--url", default="http://localhost:5000")
    parser.add_argument("--name", default="Ann")
    parser.add_argument("--email", default="ann@x.com")
    parser.add_argument("--password", default="pw1")
    parser.add_argument("--make", default="Toyota")
    parser.add_argument("--model", default="Corolla")
    parser.add_argument("--year", type=int, default=2020)
    args = parser.parse_args()

    user = login(args.url, args.email, args.password, args.name)
    add_car(args.url, user["id"], args.make, args.model, args.year)
    for car in list_cars(args.url, user["id"]):
        print(f"   - {car['_id']}: {car['year']} {car['make']} {car['model']}")
