"""
Kuratierte Wortlisten für die Grammatikregeln (Bahasa Indonesia).

- TRANSITIVE_VERBS: Verben, vor denen "di" als Passiv-Präfix zusammengeschrieben
  wird (ditulis, dibaca, ...).
- PLACE_WORDS: Ortswörter, vor denen "di" eine Präposition ist und getrennt
  stehen muss (di rumah, di Jakarta, ...).
- Die kleineren Listen gehören jeweils zu genau einer Regel. Die Reihenfolge
  der Tupel ist die Reihenfolge der Alternativen im Regex.

Alle Listen sind unveränderlich (frozenset/tuple) und werden nie zur Laufzeit
ergänzt.
"""

TRANSITIVE_VERBS = frozenset(
    {
        # Verba transitif umum
        "lakukan", "ambil", "hukum", "tulis", "buat", "atur", "atas", "ikuti",
        "perlukan", "sediakan", "berikan", "tentukan", "pilih", "kenal", "capai",
        "kembangkan", "gunakan", "percaya", "tunjukkan", "mulai", "akhiri", "lepas",
        "belikan", "suruh", "tanya", "minta", "jawab", "katakan", "peroleh", "ciptakan",
        "dengar", "lihat", "rasa", "ingat", "rinya", "pahami", "pelajari", "ubah", "tambah",
        "kurang", "buang", "simpan", "antar", "ajar", "beri", "bantu", "bimbing",
        "bina", "dukung", "dorong", "ganti", "gesa", "godok", "golekkan", "gosok",
        "gratis", "gratiskan", "gubris", "gugat", "gulung", "gumam", "gunting",
        "gurami", "gurat", "guri", "gurinda", "gurita", "gusar", "gusur", "gutil",
        "guyang",
        # Verba transitif tambahan
        "baca", "bawa", "pukul", "panggil", "kirim", "terima", "tolak", "tolong",
        "hitung", "ukur", "timbang", "cari", "temukan", "buka", "tutup",
        "masuk", "keluar", "angkat", "turun", "putar", "henti",
        # Verba dengan akhiran -kan, -i
        "buatkan", "tuliskan", "bacakan", "ajarkan", "bantukan", "kirimkan",
        "terimakan", "tolakkan", "hitungkan", "ukuri", "timbangi", "carikan",
        "bukakan", "tutupkan", "masukkan", "keluarkan", "angkatkan", "turunkan",
        "putarkan", "hentikan",
    }
)

PLACE_WORDS = frozenset(
    {
        "rumah", "sekolah", "kantor", "pasar", "jalan", "taman", "depan", "belakang",
        "atas", "bawah", "samping", "dalam", "luar", "tengah", "antara", "sekitar",
        "jakarta", "bandung", "surabaya", "yogyakarta", "medan", "makassar",
        "semarang", "palembang", "denpasar", "bali", "sumatra", "jawa", "kalimantan",
        "sulawesi", "papua", "indonesia",
        "meja", "kursi", "kamar", "ruangan", "gedung", "bangunan", "tempat",
        "kota", "desa", "negara", "provinsi", "kabupaten", "kecamatan",
        "panggung", "kertas", "lapangan", "gudang", "toko", "mall", "restoran",
        # "rumah sakit" kann als Einzelwort nie treffen, bleibt aber Teil der Liste
        "kafe", "hotel", "rumah sakit", "universitas", "kampus",
    }
)

# Ortswörter als Kontext-Indiz für ein falsch zusammengeschriebenes "di"
CONTEXT_PLACE_WORDS = (
    "rumah", "sekolah", "kantor", "tempat", "jakarta", "bandung", "surabaya",
    "indonesia", "meja", "kursi", "kamar", "ruangan", "gedung", "bangunan", "kota",
    "desa", "negara", "provinsi", "kabupaten", "kecamatan", "panggung", "kertas",
    "lapangan", "gudang", "toko", "mall", "restoran", "kafe", "hotel", "rumah sakit",
    "universitas", "kampus",
)

# Präpositionen außer "di", die getrennt vom folgenden Wort stehen müssen
OTHER_PREPOSITIONS = (
    "ke", "dari", "dalam", "pada", "untuk", "kepada", "oleh", "tanpa", "dengan",
)

PREPOSITION_PLACE_WORDS = (
    "rumah", "sekolah", "kantor", "pasar", "jalan", "taman", "jakarta", "bandung",
    "surabaya", "indonesia", "meja", "kursi", "kamar", "ruangan",
)

# Eigennamen von Orten, die großgeschrieben werden müssen
PROPER_PLACE_NAMES = (
    "indonesia", "jakarta", "surabaya", "bandung", "yogyakarta", "medan", "makassar",
    "semarang", "palembang", "denpasar", "bali", "sumatra", "jawa", "kalimantan",
    "sulawesi", "papua",
)

# Wortteile nach "ke", die auf ein echtes ke-Präfix hindeuten (kehilangan, ...)
KE_PREFIX_STEMS = ("hilangan", "beruntungan", "beradaan")

# Marker für eine Passiv-Konstruktion hinter einem di-Wort
AGENTIVE_MARKERS = ("oleh", "dari", "untuk", "kepada", "dengan")

# Präpositionen, die im Kontextfenster vor einem Ortswort stehen können
CONTEXT_PREPOSITIONS = ("di", "ke", "dari", "pada")
