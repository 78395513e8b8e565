import logging
import os
import uuid
from datetime import datetime

import pandas as pd

from capaian import TotalHafalan, format_total_hafalan
from kalkulator import calculate_from_range_string
from format_hasil import format_result
from rentang import PLACEHOLDER, get_end_part

logger = logging.getLogger(__name__)

# --- 1. STRUKTUR DATA WAJIB ---
STUDENT_COLS = ['ID_Murid', 'Nama_Murid', 'NIS', 'Kelas']
REPORT_COLS = [
    'ID_Laporan', 'Timestamp', 'ID_Murid', 'Nama_Murid', 'Kelas',
    'Jenis', 'Kategori', 'Metode', 'Rentang',
    'Halaman', 'Baris', 'Total_Baris', 'Guru_Pencatat', 'Catatan',
]

JENIS_LAPORAN = ['Tahfizh', 'Tilawah']
KATEGORI_LAPORAN = ['Individual', 'Klasikal']

# --- 2. DATA MURID ---

def initialize_students(filepath="data_murid.csv"):
    """
    Membaca daftar murid. Jika file belum ada, dibuat file baru berisi
    beberapa murid contoh dengan kolom yang benar.
    """
    try:
        df = pd.read_csv(filepath, dtype={'ID_Murid': str, 'NIS': str})
        for col in STUDENT_COLS:
            if col not in df.columns:
                df[col] = ""
        return df[STUDENT_COLS]

    except FileNotFoundError:
        logger.info("Data murid tidak ditemukan, membuat file baru: %s", filepath)
        df = pd.DataFrame({
            'ID_Murid': ['1001', '1002', '1003'],
            'Nama_Murid': ['Ani Purnamasari', 'Budi Santoso', 'Citra Dewi'],
            'NIS': ['', '', ''],
            'Kelas': ['Kelas 1A', 'Kelas 3A', 'Kelas 5B'],
        })
        df.to_csv(filepath, index=False)
        return df

# --- 3. LOG LAPORAN ---

def initialize_report_log(filepath="laporan_tahfizh.csv"):
    """Pastikan file log laporan ada dengan header yang benar."""
    if not os.path.exists(filepath) or os.stat(filepath).st_size == 0:
        pd.DataFrame(columns=REPORT_COLS).to_csv(filepath, index=False)
        logger.info("File log laporan baru dibuat: %s", filepath)
    return load_reports(filepath)


def load_reports(filepath="laporan_tahfizh.csv"):
    """Memuat log laporan; file hilang atau kosong dianggap belum ada laporan."""
    try:
        df = pd.read_csv(filepath, dtype={'ID_Murid': str, 'ID_Laporan': str})
    except (FileNotFoundError, pd.errors.EmptyDataError):
        return pd.DataFrame(columns=REPORT_COLS)

    for col in REPORT_COLS:
        if col not in df.columns:
            df[col] = ""
    df['Timestamp'] = pd.to_datetime(df['Timestamp'], errors='coerce')
    for col in ['Halaman', 'Baris', 'Total_Baris']:
        df[col] = pd.to_numeric(df[col], errors='coerce').fillna(0)
    return df[REPORT_COLS]


def build_report_row(student, jenis, kategori, rentang, guru_pencatat, catatan=""):
    """
    Satu baris log laporan. Capaian halaman/baris dihitung dari string
    rentang saat disimpan; rentang tidak valid tetap disimpan dengan capaian 0.
    """
    result = calculate_from_range_string(rentang)
    return {
        'ID_Laporan': str(uuid.uuid4()),
        'Timestamp': datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        'ID_Murid': str(student['ID_Murid']),
        'Nama_Murid': student['Nama_Murid'],
        'Kelas': student['Kelas'],
        'Jenis': jenis,
        'Kategori': kategori,
        'Metode': "Iqra" if result.is_iqra else "Al-Quran",
        'Rentang': rentang or PLACEHOLDER,
        'Halaman': result.pages,
        'Baris': result.lines,
        'Total_Baris': round(result.total_lines, 4),
        'Guru_Pencatat': guru_pencatat,
        'Catatan': catatan,
    }


def append_report(filepath, rows):
    """
    Tambahkan satu atau beberapa baris laporan ke akhir file log.
    Header hanya ditulis jika file belum ada.
    """
    if isinstance(rows, dict):
        rows = [rows]
    if not rows:
        return 0
    write_header = not os.path.exists(filepath) or os.stat(filepath).st_size == 0
    pd.DataFrame(rows, columns=REPORT_COLS).to_csv(filepath, mode="a", index=False, header=write_header)
    logger.info("%d baris laporan disimpan ke %s", len(rows), filepath)
    return len(rows)

# --- 4. REKAP CAPAIAN ---

def build_rekap_capaian(df_reports, jenis="Tahfizh", kategori="Individual"):
    """
    Rekap capaian per murid untuk satu jenis laporan: jumlah laporan,
    akumulasi juz/halaman/baris Al-Qur'an, halaman Iqra', dan posisi terakhir.
    """
    columns = [
        'ID_Murid', 'Nama_Murid', 'Kelas', 'Jumlah_Laporan', 'Total_Baris',
        'Juz', 'Halaman', 'Baris', 'Halaman_Iqra', 'Capaian', 'Posisi_Terakhir',
    ]
    if df_reports is None or df_reports.empty:
        return pd.DataFrame(columns=columns)

    df = df_reports[(df_reports['Jenis'] == jenis) & (df_reports['Kategori'] == kategori)].copy()
    if df.empty:
        return pd.DataFrame(columns=columns)
    df = df.sort_values('Timestamp', kind='stable')

    hasil = []
    for (murid_id, nama, kelas), group in df.groupby(['ID_Murid', 'Nama_Murid', 'Kelas'], sort=True):
        quran = group[group['Metode'] != "Iqra"]
        iqra = group[group['Metode'] == "Iqra"]
        total_baris = float(quran['Total_Baris'].sum())
        total = TotalHafalan.from_lines(total_baris)

        hasil.append({
            'ID_Murid': murid_id,
            'Nama_Murid': nama,
            'Kelas': kelas,
            'Jumlah_Laporan': len(group),
            'Total_Baris': round(total_baris, 2),
            'Juz': total.juz,
            'Halaman': total.pages,
            'Baris': total.lines,
            'Halaman_Iqra': int(iqra['Halaman'].sum()),
            'Capaian': format_total_hafalan(total),
            'Posisi_Terakhir': get_end_part(group['Rentang'].iloc[-1]),
        })

    return pd.DataFrame(hasil, columns=columns)


def format_report_capaian(rentang):
    """Teks capaian satu rentang untuk tabel riwayat (contoh "1 Halaman 5 Baris")."""
    return format_result(calculate_from_range_string(rentang), style="long")
