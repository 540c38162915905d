import streamlit as st, random, json
import api as API
from gen_data import gen_message_record, gen_user_record
from components import show_json, show_table

st.title("📥 Insert")

# ------------------------
# Session state
# ------------------------
if "generated_records" not in st.session_state:
    st.session_state.generated_records = []

# ------------------------
# Controls
# ------------------------
col1, col2, col3 = st.columns(3)
with col1:
    table = st.selectbox("Table", ["messages", "users"], key="ins_table")
with col2:
    total_n = st.number_input("Total records", 1, 500, 10, key="ins_total")
with col3:
    seed = st.number_input("Random seed", 0, 999999, 0, key="ins_seed")

# ------------------------
# Helpers
# ------------------------
def _gen(table: str, n: int):
    if seed:
        random.seed(int(seed))
    make = gen_message_record if table == "messages" else gen_user_record
    return [make() for _ in range(n)]

def _post_all(table: str, records):
    """POST each record on its own; collect one result row per record."""
    results = []
    prog = st.progress(0.0)
    for i, rec in enumerate(records, start=1):
        try:
            resp = API.insert(table, rec)
            results.append({"#": i, "ok": True, "id": resp.get("id"), "error": None})
        except Exception as e:
            results.append({"#": i, "ok": False, "id": None, "error": str(e)})
        prog.progress(i / len(records))
    return results

# ------------------------
# Generate & Preview
# ------------------------
cA, cB = st.columns(2)
with cA:
    if st.button("🎲 Generate records", key="btn_gen"):
        st.session_state.generated_records = _gen(table, int(total_n))
        st.success(f"Generated {len(st.session_state.generated_records)} {table} record(s).")
with cB:
    if st.button("Preview first 2 elements", key="btn_preview"):
        if not st.session_state.generated_records:
            st.info("No generated records yet — click **Generate records** first.")
        else:
            show_json(st.session_state.generated_records[:2], caption="Preview (first 2 records)")

if st.session_state.generated_records and st.button("➡️ Insert generated records", key="btn_insert_gen"):
    results = _post_all(table, st.session_state.generated_records)
    ok = sum(1 for r in results if r["ok"])
    st.write(f"**Records**: success={ok} failed={len(results) - ok} total={len(results)}")
    show_table(results)

st.divider()

# ------------------------
# Raw JSON (manual)
# ------------------------
st.caption("Or paste a JSON object (or array of objects) and POST it to `/api/insert/{table}`")
payload_text = st.text_area("Paste JSON", height=180, key="ins_textarea",
                            placeholder='{"name":"Ana","email":"ana@example.com","message":"Hi"}')
if st.button("POST pasted JSON", key="btn_paste_post"):
    try:
        data = json.loads(payload_text)
        records = data if isinstance(data, list) else [data]
        show_table(_post_all(table, records))
    except Exception as e:
        st.error(e)
