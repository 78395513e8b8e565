import logging
import os
from datetime import datetime
from io import BytesIO

import pandas as pd
import plotly.express as px
import streamlit as st
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from capaian import TotalHafalan, calculate_sdq_progress, get_juz_label
from format_hasil import format_result
from kalkulator import calculate_from_range_string, calculate_normalized
from laporan_data import (
    JENIS_LAPORAN,
    KATEGORI_LAPORAN,
    append_report,
    build_rekap_capaian,
    build_report_row,
    format_report_capaian,
    initialize_report_log,
    initialize_students,
    load_reports,
)
from quran_data import IQRA_PAGES, IQRA_VOLUMES, SURAH_METADATA, SURAH_NAMES
from rentang import format_range_display, make_endpoint, normalize_range, render_range

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

# =============================
# KONFIGURASI APLIKASI / FILE
# =============================

BASE_DIR = os.environ.get("TAHFIZH_DATA_DIR") or os.path.dirname(os.path.abspath(__file__))
MURID_FILE = os.path.join(BASE_DIR, "data_murid.csv")
LAPORAN_FILE = os.path.join(BASE_DIR, "laporan_tahfizh.csv")
logo_path = os.path.join(BASE_DIR, "logo.png")

METODE_QURAN = "Al-Quran"
METODE_IQRA = "Iqra"
ESTIMASI_INFO = "Sebaran ayat di luar Juz 30 masih estimasi, jumlah baris bisa sedikit berbeda dari mushaf."

st.set_page_config(
    page_title="Capaian Tahfizh & Tilawah",
    layout="wide",
    initial_sidebar_state="expanded",
)

# =============================
# FORMULIR RENTANG
# =============================

def range_input(key_prefix, title):
    """
    Satu blok input "DARI - SAMPAI" dengan pilihan metode Al-Qur'an / Iqra'.
    Mengembalikan (string rentang ringkas, CalculationResult).
    """
    st.markdown(f"**{title}**")
    metode = st.radio(
        "Metode",
        options=[METODE_QURAN, METODE_IQRA],
        index=0,
        horizontal=True,
        key=f"{key_prefix}_metode",
    )
    sumber = SURAH_NAMES if metode == METODE_QURAN else IQRA_VOLUMES
    label_nomor = "Ayat" if metode == METODE_QURAN else "Hal"

    col1, col2 = st.columns([3, 1])
    with col1:
        dari_nama = st.selectbox("Dari", ["-"] + sumber, key=f"{key_prefix}_dari_nama")
    with col2:
        dari_nomor = st.number_input(label_nomor, min_value=1, value=1, key=f"{key_prefix}_dari_nomor")

    col3, col4 = st.columns([3, 1])
    with col3:
        sampai_nama = st.selectbox("Sampai", ["-"] + sumber, key=f"{key_prefix}_sampai_nama")
    with col4:
        sampai_nomor = st.number_input(label_nomor, min_value=1, value=1, key=f"{key_prefix}_sampai_nomor")

    if dari_nama == "-":
        st.caption("Total: -")
        return "-", None

    if sampai_nama == "-":
        sampai_nama = dari_nama

    normalized = normalize_range(make_endpoint(dari_nama, dari_nomor), make_endpoint(sampai_nama, sampai_nomor))
    result = calculate_normalized(normalized)
    if not result.valid:
        st.warning("Rentang tidak valid. Periksa nama surah/jilid dan nomor ayat/halaman.")
        return "-", result

    st.caption(format_result(result, style="total"))
    if result.estimated:
        st.caption(ESTIMASI_INFO)
    return render_range(normalized), result

# =============================
# HALAMAN: INPUT LAPORAN
# =============================

def page_input_laporan(df_murid, selected_class, selected_guru):
    st.header("📝 Input Laporan Tahfizh & Tilawah")

    if selected_class == "Pilih Kelas":
        st.warning("Mohon pilih kelas di sidebar terlebih dahulu.")
        return

    class_df = df_murid[df_murid['Kelas'] == selected_class]
    student_map = {
        f"{row['Nama_Murid']} (ID: {row['ID_Murid']})": row['ID_Murid']
        for _, row in class_df.iterrows()
    }
    selected_student_display = st.selectbox("Pilih Murid", ['Pilih Murid'] + list(student_map.keys()))
    if selected_student_display == 'Pilih Murid':
        return

    student_row = class_df[class_df['ID_Murid'] == student_map[selected_student_display]].iloc[0]
    st.subheader(f"Murid: {student_row['Nama_Murid']}")

    rentang = {}
    col_tahfizh, col_tilawah = st.columns(2)
    with col_tahfizh:
        st.markdown("### 📗 Capaian Tahfizh")
        for kategori in KATEGORI_LAPORAN:
            rentang[("Tahfizh", kategori)], _ = range_input(f"tahfizh_{kategori}", kategori)
    with col_tilawah:
        st.markdown("### 📘 Capaian Tilawah")
        for kategori in KATEGORI_LAPORAN:
            rentang[("Tilawah", kategori)], _ = range_input(f"tilawah_{kategori}", kategori)

    catatan = st.text_area("Catatan", max_chars=500)

    if st.button("✅ Simpan Laporan"):
        if selected_guru == "Pilih Guru":
            st.warning("Isi nama guru pencatat di sidebar terlebih dahulu.")
            return
        rows = [
            build_report_row(student_row, jenis, kategori, teks, selected_guru, catatan)
            for (jenis, kategori), teks in rentang.items()
            if teks != "-"
        ]
        if not rows:
            st.warning("Belum ada rentang yang diisi.")
            return
        try:
            jumlah = append_report(LAPORAN_FILE, rows)
        except OSError as e:
            logger.exception("Gagal menyimpan laporan")
            st.error(f"Gagal menyimpan laporan: {e}")
            return
        st.success(f"{jumlah} catatan laporan **{student_row['Nama_Murid']}** berhasil disimpan.")

# =============================
# HALAMAN: RIWAYAT LAPORAN
# =============================

def page_riwayat_laporan(selected_class):
    st.header("📜 Riwayat Laporan")

    df_log = load_reports(LAPORAN_FILE)
    if df_log.empty:
        st.info("Belum ada data laporan.")
        return

    if selected_class != "Pilih Kelas":
        df_log = df_log[df_log['Kelas'] == selected_class]

    col1, col2 = st.columns(2)
    selected_jenis = col1.selectbox("Jenis", ["Semua Jenis"] + JENIS_LAPORAN)
    guru_unik = ["Semua Guru"] + sorted(df_log['Guru_Pencatat'].dropna().astype(str).unique())
    selected_guru = col2.selectbox("Guru Pencatat", guru_unik)

    df_filtered = df_log.copy()
    if selected_jenis != "Semua Jenis":
        df_filtered = df_filtered[df_filtered['Jenis'] == selected_jenis]
    if selected_guru != "Semua Guru":
        df_filtered = df_filtered[df_filtered['Guru_Pencatat'] == selected_guru]

    df_filtered = df_filtered.sort_values('Timestamp', ascending=False)
    df_filtered['Capaian'] = df_filtered['Rentang'].apply(format_report_capaian)
    df_filtered['Rentang'] = df_filtered['Rentang'].apply(format_range_display)

    display_cols = ['Timestamp', 'Nama_Murid', 'Kelas', 'Jenis', 'Kategori', 'Rentang', 'Capaian', 'Guru_Pencatat', 'Catatan']
    st.dataframe(df_filtered[display_cols], use_container_width=True)

    csv_bytes = df_filtered.to_csv(index=False).encode('utf-8')
    st.download_button(
        "📥 Unduh CSV Riwayat Terpilih",
        data=csv_bytes,
        file_name="riwayat_laporan.csv",
        mime="text/csv",
    )

# =============================
# HALAMAN: REKAP CAPAIAN
# =============================

def build_excel_rekap(rekap_df, judul):
    """Rekap ke file Excel: judul di baris 1, tabel mulai baris 3 dengan header berwarna."""
    output = BytesIO()
    sheet_name = "Rekap Capaian"
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        rekap_df.to_excel(writer, sheet_name=sheet_name, index=False, startrow=2)
        sheet = writer.sheets[sheet_name]
        jumlah_kolom = max(1, len(rekap_df.columns))

        judul_cell = sheet.cell(row=1, column=1, value=judul)
        judul_cell.font = Font(size=14, bold=True)
        judul_cell.alignment = Alignment(horizontal="center")
        if jumlah_kolom > 1:
            sheet.merge_cells(start_row=1, start_column=1, end_row=1, end_column=jumlah_kolom)

        header_fill = PatternFill(fill_type="solid", fgColor="DDEBF7")
        for idx, nama_kolom in enumerate(rekap_df.columns, start=1):
            header = sheet.cell(row=3, column=idx)
            header.font = Font(bold=True)
            header.fill = header_fill
            header.alignment = Alignment(horizontal="center")

            isi = [len(str(v)) for v in rekap_df[nama_kolom].tolist()]
            sheet.column_dimensions[get_column_letter(idx)].width = max([len(str(nama_kolom))] + isi) + 3

        sheet.freeze_panes = "A4"
    return output.getvalue()


def page_rekap_capaian(selected_class):
    st.header("📊 Rekap Capaian per Murid")

    df_log = load_reports(LAPORAN_FILE)
    if df_log.empty:
        st.info("Belum ada data laporan.")
        return

    col1, col2 = st.columns(2)
    jenis = col1.selectbox("Jenis", JENIS_LAPORAN, key="rekap_jenis")
    kategori = col2.selectbox("Kategori", KATEGORI_LAPORAN, key="rekap_kategori")

    rekap_df = build_rekap_capaian(df_log, jenis, kategori)
    if selected_class != "Pilih Kelas":
        rekap_df = rekap_df[rekap_df['Kelas'] == selected_class]
    if rekap_df.empty:
        st.info("Belum ada laporan untuk pilihan ini.")
        return

    progres = []
    for _, row in rekap_df.iterrows():
        total = TotalHafalan(int(row['Juz']), int(row['Halaman']), int(row['Baris']))
        hasil = calculate_sdq_progress(row['Kelas'], row['Posisi_Terakhir'], total)
        progres.append({
            'Target SDQ': hasil.label,
            'Persentase (%)': hasil.percentage,
            'Status': hasil.status_text,
            'Juz Terakhir': get_juz_label(row['Posisi_Terakhir']),
        })
    rekap_df = pd.concat([rekap_df.reset_index(drop=True), pd.DataFrame(progres)], axis=1)

    st.dataframe(rekap_df, use_container_width=True)

    fig = px.bar(
        rekap_df,
        x='Nama_Murid',
        y='Persentase (%)',
        color='Status',
        title=f"Progres Target SDQ - {jenis} {kategori}",
    )
    st.plotly_chart(fig, use_container_width=True)

    judul = f"Rekap Capaian {jenis} {kategori} - {datetime.now().strftime('%d-%m-%Y')}"
    st.download_button(
        label="📥 Unduh Rekap (Excel)",
        data=build_excel_rekap(rekap_df, judul),
        file_name=f"Rekap_{jenis}_{kategori}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )

# =============================
# HALAMAN: KALKULATOR RENTANG
# =============================

def page_kalkulator():
    st.header("🧮 Kalkulator Rentang")
    st.caption("Format: `An-Naba': 1 - An-Nazi'at: 5` atau `Iqra' 1: 10 - Iqra' 2: 5`")

    teks = st.text_input("Rentang", value="An-Naba': 1 - An-Naba': 10")
    result = calculate_from_range_string(teks)
    if not result.valid:
        st.error("Rentang tidak valid.")
        return

    col1, col2, col3 = st.columns(3)
    col1.metric("Halaman", result.pages)
    col2.metric("Baris", "-" if result.is_iqra else result.lines)
    col3.metric("Total Baris", "-" if result.is_iqra else round(result.total_lines, 2))
    st.success(format_result(result, style="long"))
    if result.estimated:
        st.info(ESTIMASI_INFO)

    with st.expander("Data master"):
        st.dataframe(
            pd.DataFrame(SURAH_METADATA, columns=['No', 'Surah', 'Jumlah Ayat', 'Halaman Awal']),
            use_container_width=True,
        )
        st.dataframe(
            pd.DataFrame(list(IQRA_PAGES.items()), columns=['Jilid', 'Jumlah Halaman']),
            use_container_width=True,
        )

# =============================
# SIDEBAR (NAVIGASI)
# =============================

def sidebar_controls(df_murid):
    st.sidebar.title("Navigasi")

    if os.path.exists(logo_path):
        st.sidebar.image(logo_path, width=120)

    menu = st.sidebar.radio(
        "Pilih Tampilan",
        [
            "📝 Input Laporan",
            "📜 Riwayat Laporan",
            "📊 Rekap Capaian",
            "🧮 Kalkulator Rentang",
        ],
    )

    selected_guru = st.sidebar.text_input("Nama Guru Pencatat", value="").strip() or "Pilih Guru"

    kelas_list = ["Pilih Kelas"] + sorted(df_murid["Kelas"].dropna().astype(str).unique().tolist())
    selected_class = st.sidebar.selectbox("Kelas", kelas_list)

    return menu, selected_class, selected_guru

# =============================
# MAIN APP FLOW
# =============================

def main_app():
    df_murid = initialize_students(MURID_FILE)
    initialize_report_log(LAPORAN_FILE)

    menu, selected_class, selected_guru = sidebar_controls(df_murid)

    if menu == "📝 Input Laporan":
        page_input_laporan(df_murid, selected_class, selected_guru)

    elif menu == "📜 Riwayat Laporan":
        page_riwayat_laporan(selected_class)

    elif menu == "📊 Rekap Capaian":
        page_rekap_capaian(selected_class)

    elif menu == "🧮 Kalkulator Rentang":
        page_kalkulator()


if __name__ == "__main__":
    main_app()
