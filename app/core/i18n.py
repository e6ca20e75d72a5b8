"""User-facing message translation (English canonical text -> Indonesian)."""

# Keys ending in ": " are prefixes; the remainder of the message (usually an error detail) is kept.
TRANSLATIONS_ID: dict[str, str] = {
    "Method not allowed": "Metode tidak diizinkan",
    "Not found": "Tidak ditemukan",
    "Unauthorized": "Tidak terautentikasi",
    "Authorization header required": "Header Authorization diperlukan",
    "Invalid Authorization format": "Format Authorization tidak valid",
    "Invalid token": "Token tidak valid",
    "Admin access required": "Akses admin diperlukan",
    "User not found": "Pengguna tidak ditemukan",
    "Failed to fetch payments": "Gagal mengambil riwayat pembayaran",
    "Failed to fetch payment summary": "Gagal mengambil ringkasan pembayaran",
    "Invalid request body": "Isi permintaan tidak valid",
    "Username and password are required": "Username dan kata sandi diperlukan",
    "Invalid credentials": "Kredensial tidak valid",
    "Failed to generate token": "Gagal membuat token",
    "NIS and password are required": "NIS dan kata sandi diperlukan",
    "Old password and new password are required": "Kata sandi lama dan baru diperlukan",
    "New password must be at least 6 characters": "Kata sandi baru harus minimal 6 karakter",
    "user_id is required": "user_id diperlukan",
    "Invalid user_id": "user_id tidak valid",
    "payment_id is required": "payment_id diperlukan",
    "Invalid payment_id": "payment_id tidak valid",
    "Payment not found": "Pembayaran tidak ditemukan",
    "Failed to delete payment": "Gagal menghapus pembayaran",
    "nis is required": "NIS diperlukan",
    "Failed to fetch user": "Gagal mengambil data pengguna",
    "Failed to create payment: ": "Gagal membuat pembayaran: ",
    "Failed to update payment: ": "Gagal memperbarui pembayaran: ",
    "No fields to update": "Tidak ada field untuk diperbarui",
    "Old password is incorrect": "Kata sandi lama salah",
    "Failed to hash password": "Gagal mengenkripsi kata sandi",
    "Failed to update password": "Gagal memperbarui kata sandi",
    "Password changed successfully": "Kata sandi berhasil diubah",
    "Nominal must be greater than 0": "Nominal harus lebih besar dari 0",
    "Tanggal is required": "Tanggal diperlukan",
    "Tanggal must be in YYYY-MM-DD format": "Tanggal harus berformat YYYY-MM-DD",
    "NIS, virtual account, name, and password are required": (
        "NIS, virtual account, nama, dan kata sandi diperlukan"
    ),
    "Student with this NIS or virtual account already exists": (
        "Siswa dengan NIS atau virtual account tersebut sudah ada"
    ),
    "User ID and new password are required": "ID pengguna dan kata sandi baru diperlukan",
    "Can only reset student passwords": "Hanya kata sandi siswa yang dapat direset",
    "Can only delete student accounts": "Hanya akun siswa yang dapat dihapus",
    "Password reset successfully": "Kata sandi berhasil direset",
    "Payment deleted successfully": "Pembayaran berhasil dihapus",
    "Student deleted successfully": "Siswa berhasil dihapus",
    "Database error": "Kesalahan basis data",
    "Internal server error": "Terjadi kesalahan pada server",
}


def translate(message: str, locale: str = "id") -> str:
    """
    Return message in the given locale.

    Exact matches win; otherwise a prefix key such as "Failed to create payment: "
    is replaced and the rest of the message kept. Unknown messages pass through.
    """
    if locale != "id":
        return message
    translated = TRANSLATIONS_ID.get(message)
    if translated is not None:
        return translated
    for english, indonesian in TRANSLATIONS_ID.items():
        if english.endswith(": ") and message.startswith(english):
            return indonesian + message[len(english):]
    return message
