# client/gen_data.py
import random

FIRST = ["Alex","Jamie","Taylor","Jordan","Sam","Avery","Casey","Riley","Morgan","Quinn","Jesse","Cameron"]
LAST  = ["Chen","Garcia","Patel","Santos","Lee","Kim","Johnson","Brown","Wilson","Martinez","Davis","Nguyen"]
TOPICS= ["pricing","a demo","an invoice","support hours","a partnership","the API","my account"]

def _name(): return f"{random.choice(FIRST)} {random.choice(LAST)}"
def _email(n): return f"{''.join(c for c in n.lower() if c.isalpha())}{random.randint(1,999)}@example.com"
def _phone(): return f"+1-555-{random.randint(1000,9999)}"

def gen_message_record():
    n = _name()
    return {
        "name": n,
        "email": _email(n),
        "phone": random.choice([_phone(), ""]),
        "message": f"Hi, I'd like to ask about {random.choice(TOPICS)}.",
        "accepted_terms": random.random() < 0.9,
    }

def gen_user_record():
    n = _name()
    return {
        "name": n,
        "email": _email(n),
        "password": "".join(random.choice("abcdefghjkmnpqrstuvwxyz23456789") for _ in range(10)),
    }
