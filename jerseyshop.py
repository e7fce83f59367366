import logging
import os

import streamlit as st

from catalog import load_catalog
from constants import EMOJIS, GRID_COLUMNS, IMAGE_DIR, LAYOUT, PAGE_ICON, PAGE_TITLE
from formatters import format_money, format_summary_text, summary_frame
from summary import summarize

logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s', level=logging.INFO)
logger = logging.getLogger(__name__)

IMAGE_ROOT = os.path.join(os.path.dirname(os.path.abspath(__file__)), IMAGE_DIR)

# =========================
# SESSION STATE
# =========================
def init_state():
    if "store" not in st.session_state:
        st.session_state.store = load_catalog()
    if "rendered_version" not in st.session_state:
        st.session_state.rendered_version = -1


def select_product(product_id):
    st.session_state.store.toggle_bag(product_id)

# =========================
# UI
# =========================
def product_card(product):
    photo_path = os.path.join(IMAGE_ROOT, product.photo)
    if os.path.exists(photo_path):
        st.image(photo_path, use_container_width=True)
    else:
        st.caption(product.photo)
    st.markdown(f"**{product.name}**")
    st.write(format_money(product.price))

    label = "Remove from bag" if product.in_bag else "Add to bag"
    st.button(label, key=f"toggle_{product.id}", on_click=select_product, args=(product.id,),
              type="primary" if product.in_bag else "secondary")

    if product.in_bag:
        # quantity controls are display only, nothing mutates quantity from the page yet
        minus, qty, plus = st.columns(3)
        minus.button("−", key=f"dec_{product.id}", disabled=True)
        qty.markdown(f"Qty: **{product.quantity}**")
        plus.button("+", key=f"inc_{product.id}", disabled=True)


def product_page(store):
    st.header(f"{EMOJIS['SHIRT']} Jersey Shop")
    cols = st.columns(GRID_COLUMNS)
    for i, product in enumerate(store.get_all()):
        with cols[i % GRID_COLUMNS]:
            product_card(product)


def order_details(store):
    summary = summarize(store.in_bag())
    if summary is None:
        return
    st.divider()
    st.subheader("Order Details")
    st.table(summary_frame(summary))
    st.metric(f"{EMOJIS['MONEY']} Total", format_money(summary.total))
    st.download_button("Download order", format_summary_text(summary),
                       file_name="order.txt", mime="text/plain")


def main():
    st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout=LAYOUT)
    init_state()
    store = st.session_state.store

    if st.session_state.rendered_version != store.version:
        logger.info("Rendering catalog version %d (%d in bag)", store.version, len(store.in_bag()))
        st.session_state.rendered_version = store.version

    st.sidebar.title(f"{EMOJIS['BAG']} Bag")
    st.sidebar.write("Items in bag:", len(store.in_bag()))

    product_page(store)
    order_details(store)


main()
