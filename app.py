# app.py
import io

import pandas as pd
import streamlit as st

from correlator import available_scorers, config
from correlator.catalog import (
    CD,
    DiscographyAlbum,
    WantlistItem,
    artist_report,
    capitalize_words,
    find_duplicate_groups,
    is_owned,
)

REQUIRED_COLUMNS = ("artist", "title")

st.set_page_config(page_title="Catalog cross-check", layout="wide")
st.title("💿 Catalog cross-check")

st.write("Upload an .xlsx or .xls workbook with your collection, wantlist and (optionally) discographies.")

with st.sidebar:
    scorer_names = available_scorers()
    scorer = st.selectbox(
        "Scorer",
        scorer_names,
        index=scorer_names.index(config["DEFAULT_SCORER"]) if config["DEFAULT_SCORER"] in scorer_names else 0,
    )
    artist_threshold = st.slider("Artist threshold", 0.0, 1.0, float(config["ARTIST_THRESHOLD"]), 0.01)
    title_threshold = st.slider("Title threshold", 0.0, 1.0, float(config["TITLE_THRESHOLD"]), 0.01)
    duplicate_threshold = st.slider("Duplicate threshold", 0.0, 1.0, float(config["DUPLICATE_THRESHOLD"]), 0.01)

uploaded = st.file_uploader("Choose workbook", type=["xlsx", "xls"])


@st.cache_data(show_spinner=False)
def sheet_names(bytes_data: bytes):
    # Only sheet names (serializable)
    xls = pd.ExcelFile(io.BytesIO(bytes_data))
    return xls.sheet_names


@st.cache_data(show_spinner=False)
def read_sheet(bytes_data: bytes, sheet: str) -> pd.DataFrame:
    df = pd.read_excel(io.BytesIO(bytes_data), sheet_name=sheet, header=0, engine="openpyxl")
    df.columns = [str(c).strip().lower() for c in df.columns]
    return df


def _text(x) -> str:
    if pd.isna(x):
        return ""
    return str(x).strip()


def _year(x):
    if pd.isna(x):
        return None
    try:
        return int(x)
    except (TypeError, ValueError):
        return None


def _missing_columns(df: pd.DataFrame, label: str) -> bool:
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        st.error(f"Sheet **{label}** is missing column(s): {', '.join(missing)}")
        return True
    return False


def to_cds(df: pd.DataFrame):
    return [
        CD(id=str(i), artist=_text(row.get("artist")), title=_text(row.get("title")), year=_year(row.get("year")))
        for i, row in df.iterrows()
    ]


def to_wantlist(df: pd.DataFrame):
    return [
        WantlistItem(id=str(i), artist=_text(row.get("artist")), title=_text(row.get("title")), year=_year(row.get("year")))
        for i, row in df.iterrows()
    ]


if uploaded is not None:
    try:
        bytes_data = uploaded.getvalue()
        sheets = sheet_names(bytes_data)
        none_option = "(none)"

        c1, c2, c3 = st.columns(3)
        with c1:
            sheet_collection = st.selectbox("Collection sheet", sheets, index=0)
        with c2:
            sheet_wantlist = st.selectbox("Wantlist sheet", [none_option] + sheets, index=min(2, len(sheets)))
        with c3:
            sheet_disco = st.selectbox("Discography sheet", [none_option] + sheets, index=0)

        df_collection = read_sheet(bytes_data, sheet_collection)
        cds = []
        if not _missing_columns(df_collection, sheet_collection):
            cds = to_cds(df_collection)
            st.caption(f"Collection **{sheet_collection}**: {len(cds):,} entries")

        wantlist = []
        if cds and sheet_wantlist != none_option:
            df_wantlist = read_sheet(bytes_data, sheet_wantlist)
            if not _missing_columns(df_wantlist, sheet_wantlist):
                wantlist = to_wantlist(df_wantlist)

        # Wantlist entries already in the collection
        if wantlist:
            st.subheader("Wantlist entries already owned")
            rows = []
            for item in wantlist:
                cd = is_owned(item, cds, artist_threshold, title_threshold, scorer=scorer)
                if cd is not None:
                    rows.append({
                        "wantlist artist": item.artist,
                        "wantlist title": item.title,
                        "owned artist": cd.artist,
                        "owned title": cd.title,
                    })
            if rows:
                st.dataframe(pd.DataFrame(rows), use_container_width=True)
            else:
                st.info("No wantlist entry is in the collection.")

        # Discography gaps, per artist
        if cds and sheet_disco != none_option:
            df_disco = read_sheet(bytes_data, sheet_disco)
            if not _missing_columns(df_disco, sheet_disco):
                st.subheader("Missing albums")
                df_disco = df_disco.assign(artist=df_disco["artist"].map(_text))
                for artist_name, group in df_disco.groupby("artist", sort=True):
                    if not artist_name:
                        continue
                    discography = [
                        DiscographyAlbum(title=_text(row.get("title")), year=_year(row.get("year")))
                        for _, row in group.iterrows()
                    ]
                    report = artist_report(
                        artist_name, discography, cds, wantlist, artist_threshold, title_threshold, scorer=scorer
                    )
                    with st.expander(
                        f"{capitalize_words(artist_name)}: {len(report.owned)} owned, {len(report.missing)} missing"
                    ):
                        st.dataframe(
                            pd.DataFrame(
                                [
                                    {"title": a.title, "year": a.year, "on wantlist": a in report.wanted}
                                    for a in report.missing
                                ]
                            ),
                            use_container_width=True,
                        )

        # Possible duplicates within the collection
        st.subheader("Possible duplicates")
        with st.spinner("Scanning collection..."):
            groups = find_duplicate_groups(cds, duplicate_threshold, scorer=scorer)
        if not groups:
            st.success("No duplicates found.")
        for n, group in enumerate(groups, 1):
            st.write(f"**Group {n}** ({len(group)} similar items)")
            st.dataframe(
                pd.DataFrame([{"artist": cd.artist, "title": cd.title, "year": cd.year} for cd in group]),
                use_container_width=True,
            )
    except Exception as e:
        st.error(f"Could not read workbook: {e}")
