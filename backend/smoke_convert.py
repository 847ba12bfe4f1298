import httpx

payload = {"value": 1.0, "from": "m3/s", "to": "cubic foot per second"}

r = httpx.post("http://127.0.0.1:8000/api/convert", json=payload, timeout=10)
print(r.status_code)
print(r.text)
