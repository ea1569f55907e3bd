"""Fixed lookup tables: stems, branches, Nạp Âm, hour stars, Trực, solar terms."""

from ._types import (
    DiaChi,
    Element,
    HoangDaoStar,
    HourType,
    NapAm,
    ThienCan,
    TrucId,
    TrucInfo,
)

ELEMENT_NAMES: dict[Element, str] = {
    Element.KIM: "Kim",
    Element.MOC: "Mộc",
    Element.THUY: "Thủy",
    Element.HOA: "Hỏa",
    Element.THO: "Thổ",
}

# Tương sinh: Mộc -> Hỏa -> Thổ -> Kim -> Thủy -> Mộc
GENERATING_CYCLE: tuple[Element, ...] = (
    Element.MOC,
    Element.HOA,
    Element.THO,
    Element.KIM,
    Element.THUY,
)

THIEN_CAN: tuple[ThienCan, ...] = (
    ThienCan(0, "Giáp", Element.MOC, False),
    ThienCan(1, "Ất", Element.MOC, True),
    ThienCan(2, "Bính", Element.HOA, False),
    ThienCan(3, "Đinh", Element.HOA, True),
    ThienCan(4, "Mậu", Element.THO, False),
    ThienCan(5, "Kỷ", Element.THO, True),
    ThienCan(6, "Canh", Element.KIM, False),
    ThienCan(7, "Tân", Element.KIM, True),
    ThienCan(8, "Nhâm", Element.THUY, False),
    ThienCan(9, "Quý", Element.THUY, True),
)

DIA_CHI: tuple[DiaChi, ...] = (
    DiaChi(0, "Tý", "Chuột", Element.THUY),
    DiaChi(1, "Sửu", "Trâu", Element.THO),
    DiaChi(2, "Dần", "Hổ", Element.MOC),
    DiaChi(3, "Mão", "Mèo", Element.MOC),
    DiaChi(4, "Thìn", "Rồng", Element.THO),
    DiaChi(5, "Tỵ", "Rắn", Element.HOA),
    DiaChi(6, "Ngọ", "Ngựa", Element.HOA),
    DiaChi(7, "Mùi", "Dê", Element.THO),
    DiaChi(8, "Thân", "Khỉ", Element.KIM),
    DiaChi(9, "Dậu", "Gà", Element.KIM),
    DiaChi(10, "Tuất", "Chó", Element.THO),
    DiaChi(11, "Hợi", "Lợn", Element.THUY),
)

# One entry per pair of consecutive positions in the 60 cycle (Giáp Tý, Ất Sửu -> 0).
NAP_AM: tuple[NapAm, ...] = (
    NapAm("Hải Trung Kim", Element.KIM),
    NapAm("Lư Trung Hỏa", Element.HOA),
    NapAm("Đại Lâm Mộc", Element.MOC),
    NapAm("Lộ Bàng Thổ", Element.THO),
    NapAm("Kiếm Phong Kim", Element.KIM),
    NapAm("Sơn Đầu Hỏa", Element.HOA),
    NapAm("Giản Hạ Thủy", Element.THUY),
    NapAm("Thành Đầu Thổ", Element.THO),
    NapAm("Bạch Lạp Kim", Element.KIM),
    NapAm("Dương Liễu Mộc", Element.MOC),
    NapAm("Tuyền Trung Thủy", Element.THUY),
    NapAm("Ốc Thượng Thổ", Element.THO),
    NapAm("Tích Lịch Hỏa", Element.HOA),
    NapAm("Tùng Bách Mộc", Element.MOC),
    NapAm("Trường Lưu Thủy", Element.THUY),
    NapAm("Sa Trung Kim", Element.KIM),
    NapAm("Sơn Hạ Hỏa", Element.HOA),
    NapAm("Bình Địa Mộc", Element.MOC),
    NapAm("Bích Thượng Thổ", Element.THO),
    NapAm("Kim Bạch Kim", Element.KIM),
    NapAm("Phú Đăng Hỏa", Element.HOA),
    NapAm("Thiên Hà Thủy", Element.THUY),
    NapAm("Đại Trạch Thổ", Element.THO),
    NapAm("Thoa Xuyến Kim", Element.KIM),
    NapAm("Tang Đố Mộc", Element.MOC),
    NapAm("Đại Khê Thủy", Element.THUY),
    NapAm("Sa Trung Thổ", Element.THO),
    NapAm("Thiên Thượng Hỏa", Element.HOA),
    NapAm("Thạch Lựu Mộc", Element.MOC),
    NapAm("Đại Hải Thủy", Element.THUY),
)

LUNAR_MONTH_NAMES: tuple[str, ...] = (
    "Giêng",
    "Hai",
    "Ba",
    "Tư",
    "Năm",
    "Sáu",
    "Bảy",
    "Tám",
    "Chín",
    "Mười",
    "Mười Một",
    "Chạp",
)

LEAP_MONTH_SUFFIX = " nhuận"

# Thanh Long, Minh Đường, Thiên Hình, Chu Tước, Kim Quỹ, Kim Đường,
# Bạch Hổ, Ngọc Đường, Thiên Lao, Nguyên Vũ, Tư Mệnh, Câu Trận
HOANG_DAO_STARS: tuple[HoangDaoStar, ...] = (
    HoangDaoStar("Thanh Long", HourType.HOANG_DAO, "Rồng xanh, mọi việc hanh thông"),
    HoangDaoStar("Minh Đường", HourType.HOANG_DAO, "Sáng sủa, lợi gặp quý nhân"),
    HoangDaoStar("Thiên Hình", HourType.HAC_DAO, "Hình phạt, kỵ kiện tụng"),
    HoangDaoStar("Chu Tước", HourType.HAC_DAO, "Thị phi, khẩu thiệt"),
    HoangDaoStar("Kim Quỹ", HourType.HOANG_DAO, "Tủ vàng, lợi cầu tài"),
    HoangDaoStar("Kim Đường", HourType.HOANG_DAO, "Bảo Quang, vạn sự tốt lành"),
    HoangDaoStar("Bạch Hổ", HourType.HAC_DAO, "Hổ trắng, kỵ tang sự và đi xa"),
    HoangDaoStar("Ngọc Đường", HourType.HOANG_DAO, "Lợi văn thư, học hành"),
    HoangDaoStar("Thiên Lao", HourType.HAC_DAO, "Ngục trời, mọi việc trắc trở"),
    HoangDaoStar("Nguyên Vũ", HourType.HAC_DAO, "Huyền Vũ, dễ mất mát, trộm cắp"),
    HoangDaoStar("Tư Mệnh", HourType.HOANG_DAO, "Lợi việc ban ngày, cầu phúc"),
    HoangDaoStar("Câu Trận", HourType.HAC_DAO, "Vướng víu, kỵ khởi công"),
)

# Star index for the Tý hour, by day branch. Thanh Long falls on the Thân hour
# for Tý/Ngọ days, Tuất for Sửu/Mùi, Tý for Dần/Thân, Dần for Mão/Dậu,
# Thìn for Thìn/Tuất and Ngọ for Tỵ/Hợi.
HOUR_STAR_START_TABLE: tuple[int, ...] = (4, 2, 0, 10, 8, 6, 4, 2, 0, 10, 8, 6)

# Stem of lunar month 1 (always a Dần month), by year stem.
MONTH_CAN_START: tuple[int, ...] = (2, 4, 6, 8, 0, 2, 4, 6, 8, 0)

# Stem of the Tý hour, by day stem.
HOUR_CAN_TY_START: tuple[int, ...] = (0, 2, 4, 6, 8, 0, 2, 4, 6, 8)

TRUC_INFO: tuple[TrucInfo, ...] = (
    TrucInfo(
        TrucId.KIEN,
        "Kiến",
        HourType.HAC_DAO,
        "Khởi đầu, kiến lập; hợp việc vừa phải hơn là khai mở lớn",
        ("Xuất hành", "Thăm hỏi", "Gặp gỡ", "Ký kết nhỏ", "Cầu tài"),
        ("Động thổ", "Xây cất lớn", "An táng", "Mở kho"),
    ),
    TrucInfo(
        TrucId.TRU,
        "Trừ",
        HourType.HOANG_DAO,
        "Trừ bỏ, tẩy uế; thuận loại bỏ điều xấu và làm sạch",
        ("Giải hạn", "Dọn dẹp", "Tẩy uế", "Chữa bệnh", "Cắt tóc", "Xuất hành"),
        ("Khai trương lớn", "Khởi công", "Chi tiền lớn"),
    ),
    TrucInfo(
        TrucId.MAN,
        "Mãn",
        HourType.HAC_DAO,
        "Viên mãn, đầy đủ; hợp thu nạp và tổng kết hơn là khởi tạo",
        ("Tế lễ", "Nhập kho", "Tổng kết", "Nhận hàng"),
        ("Cưới hỏi", "Khởi công", "Khai trương"),
    ),
    TrucInfo(
        TrucId.BINH,
        "Bình",
        HourType.HAC_DAO,
        "Cân bằng, yên ổn; hợp việc thường nhật, kém hợp việc lớn",
        ("Giao dịch nhỏ", "Gặp gỡ", "Học hành", "Khám bệnh"),
        ("Khởi sự lớn", "Động thổ", "Xây dựng"),
    ),
    TrucInfo(
        TrucId.DINH,
        "Định",
        HourType.HOANG_DAO,
        "Ổn định, an định; tốt để chốt việc và an vị",
        ("Ký kết", "Chốt kế hoạch", "An vị", "Nhập trạch", "Cưới hỏi"),
        ("Kiện tụng", "Xuất hành xa"),
    ),
    TrucInfo(
        TrucId.CHAP,
        "Chấp",
        HourType.HOANG_DAO,
        "Giữ gìn, duy trì; thiên về bền vững, không hợp khai mở lớn",
        ("Tu sửa", "Xây dựng", "Trồng cây", "Tuyển dụng"),
        ("Dời nhà", "Khai trương", "Xuất kho", "Chi tiền lớn"),
    ),
    TrucInfo(
        TrucId.PHA,
        "Phá",
        HourType.HAC_DAO,
        "Phá bỏ, kết liễu; hợp dỡ bỏ cái cũ",
        ("Phá dỡ", "Thanh lý", "Kết thúc việc cũ", "Chữa bệnh"),
        ("Khởi công", "Khai trương", "Cưới hỏi", "Nhập trạch", "Ký kết"),
    ),
    TrucInfo(
        TrucId.NGUY,
        "Nguy",
        HourType.HAC_DAO,
        "Nguy nan, cẩn trọng; chỉ hợp việc đòi hỏi tỉ mỉ",
        ("Lễ bái", "Cầu an", "Kiểm tra an toàn"),
        ("Khai trương", "Động thổ", "Cưới hỏi", "Đi xa", "Đi thuyền"),
    ),
    TrucInfo(
        TrucId.THANH,
        "Thành",
        HourType.HOANG_DAO,
        "Thành tựu, hoàn tất; rất thuận việc lớn và việc mừng",
        ("Khánh thành", "Ký kết", "Khai trương", "Cưới hỏi", "Nhập trạch", "Nhậm chức"),
        ("Kiện tụng", "Phá dỡ"),
    ),
    TrucInfo(
        TrucId.THU,
        "Thu",
        HourType.HAC_DAO,
        "Thu nạp, thu hoạch; hợp gom góp cất giữ hơn là mở rộng",
        ("Thu hoạch", "Thu nợ", "Nhập kho", "Cất giữ"),
        ("Khai trương", "Khởi công", "An táng"),
    ),
    TrucInfo(
        TrucId.KHAI,
        "Khai",
        HourType.HOANG_DAO,
        "Khai mở, mở mang; đại cát cho các việc mở đầu",
        ("Khai trương", "Khởi công", "Xuất hành", "Nhậm chức", "Cưới hỏi"),
        ("An táng", "Động thổ", "Đào giếng"),
    ),
    TrucInfo(
        TrucId.BE,
        "Bế",
        HourType.HAC_DAO,
        "Đóng lại, kết thúc; kỵ khởi sự",
        ("Kết thúc", "Đóng kho", "Đắp đập", "Vá sửa"),
        ("Khai trương", "Khởi công", "Cưới hỏi", "Xuất hành", "Nhậm chức"),
    ),
)

# (name, Hán name, description), starting from Tiểu Hàn in early January.
SOLAR_TERMS: tuple[tuple[str, str, str], ...] = (
    ("Tiểu Hàn", "小寒", "Rét nhẹ, thời tiết lạnh nhưng chưa đến mức cực điểm"),
    ("Đại Hàn", "大寒", "Rét đậm, thời kỳ lạnh nhất trong năm"),
    ("Lập Xuân", "立春", "Bắt đầu mùa xuân, vạn vật bắt đầu sinh trưởng"),
    ("Vũ Thủy", "雨水", "Mưa xuân, mưa phùn bắt đầu xuất hiện"),
    ("Kinh Trập", "驚蟄", "Sấm đầu mùa, côn trùng thức giấc"),
    ("Xuân Phân", "春分", "Ngày đêm dài bằng nhau, giữa xuân"),
    ("Thanh Minh", "清明", "Trời trong sáng, thời tiết ấm áp"),
    ("Cốc Vũ", "穀雨", "Mưa nuôi lúa, cây cối phát triển"),
    ("Lập Hạ", "立夏", "Bắt đầu mùa hạ, thời tiết nóng lên"),
    ("Tiểu Mãn", "小滿", "Lúa bắt đầu chắc hạt"),
    ("Mang Chủng", "芒種", "Lúa trổ đòng, mùa gặt đến gần"),
    ("Hạ Chí", "夏至", "Ngày dài nhất năm, giữa hè"),
    ("Tiểu Thử", "小暑", "Nóng nhẹ, thời tiết nóng nhưng chưa cực điểm"),
    ("Đại Thử", "大暑", "Nóng đỉnh điểm, thời kỳ nóng nhất trong năm"),
    ("Lập Thu", "立秋", "Bắt đầu mùa thu, thời tiết mát mẻ hơn"),
    ("Xử Thử", "處暑", "Hết nóng, thời tiết mát dần"),
    ("Bạch Lộ", "白露", "Sương trắng, sương đêm bắt đầu xuất hiện"),
    ("Thu Phân", "秋分", "Ngày đêm dài bằng nhau, giữa thu"),
    ("Hàn Lộ", "寒露", "Sương lạnh, thời tiết lạnh hơn"),
    ("Sương Giáng", "霜降", "Sương giá, sương đọng thành giá"),
    ("Lập Đông", "立冬", "Bắt đầu mùa đông, thời tiết lạnh"),
    ("Tiểu Tuyết", "小雪", "Tuyết nhẹ, thời tiết lạnh"),
    ("Đại Tuyết", "大雪", "Tuyết nặng, thời tiết rất lạnh"),
    ("Đông Chí", "冬至", "Ngày ngắn nhất năm, giữa đông"),
)

# Average (month, day) of each solar term, same order as SOLAR_TERMS.
SOLAR_TERM_BASE_DATES: tuple[tuple[int, int], ...] = (
    (1, 6),
    (1, 20),
    (2, 4),
    (2, 19),
    (3, 6),
    (3, 21),
    (4, 5),
    (4, 20),
    (5, 6),
    (5, 21),
    (6, 6),
    (6, 21),
    (7, 7),
    (7, 23),
    (8, 7),
    (8, 23),
    (9, 8),
    (9, 23),
    (10, 8),
    (10, 23),
    (11, 7),
    (11, 22),
    (12, 7),
    (12, 22),
)
