import streamlit as st
import pandas as pd
import requests
from typing import Optional

from app.core.config import settings

def fetch_records(path: str, base_url: str = settings.ADMIN_API_URL) -> Optional[pd.DataFrame]:
    """
    Loads a list endpoint of the running backend into a DataFrame.
    Returns None if the backend is unreachable or answers with an error.
    """
    try:
        response = requests.get(f"{base_url}{path}", timeout=10)
        response.raise_for_status()
        return pd.DataFrame(response.json())
    except requests.RequestException as e:
        st.error(f"Could not load {path}: {e}")
        return None

def cart_total(df: pd.DataFrame) -> float:
    if df is None or df.empty:
        return 0.0
    return float((df["price"] * df["quantity"]).sum())

def main():
    st.set_page_config(
        page_title="Health Portal Admin",
        page_icon="📅",
        layout="centered"
    )
    st.title("Health Portal - Admin Panel")
    st.caption("Data lives in the backend's memory and is lost when it restarts.")

    if st.button("Refresh"):
        st.rerun()

    appointments = fetch_records("/api/appointments")
    cart = fetch_records("/api/cart")

    st.subheader("Appointments")
    if appointments is not None and not appointments.empty:
        col1, col2 = st.columns(2)
        col1.metric("Booked appointments", len(appointments))
        col2.metric("Professional types", appointments["type"].nunique())
        appointments["bookedAt"] = pd.to_datetime(appointments["bookedAt"])
        st.dataframe(
            appointments.sort_values("id", ascending=False),
            use_container_width=True,
            column_config={
                "bookedAt": st.column_config.DatetimeColumn("Booked at", format="D.M.YYYY HH:mm"),
                "type": "Type",
                "name": "Professional",
                "date": "Date",
                "time": "Time",
                "notes": "Notes",
                "id": "ID"
            }
        )
    else:
        st.info("No appointments yet.")

    st.subheader("Cart")
    if cart is not None and not cart.empty:
        col1, col2 = st.columns(2)
        col1.metric("Items", int(cart["quantity"].sum()))
        col2.metric("Total value", f"{cart_total(cart):.2f}")
        st.dataframe(cart, use_container_width=True)
    else:
        st.info("The cart is empty.")

    st.markdown("---")
    st.caption(f"{settings.PROJECT_NAME} • {settings.ADMIN_API_URL}")

if __name__ == "__main__":
    main()
