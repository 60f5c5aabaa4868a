def ada(**overrides) -> dict:
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@x.com",
        "department": "Engineering",
        "position": "Analyst",
        "salary": 90000,
    }
    payload.update(overrides)
    return payload
