# catalog.py
"""
Static reference data for Healthy Diary: the food menu and the exercise table.

Both tables are loaded once at import time and never mutated. Menu entries
carry a season tag ("spring", "summer", "fall", "winter" or "all") and a
difficulty tier ("easy", "medium", "hard"); exercise entries carry a MET value
used for weight-based calorie estimates.
"""

FOOD_CATEGORIES = ("한식", "양식", "중식", "일식", "샐러드", "스무디", "간식", "디저트")
EXERCISE_CATEGORIES = ("aerobic", "strength", "sport", "other")


def _menu(menu_id, name, category, calories, protein, carbs, fat,
          ingredients, cooking_time, difficulty, season,
          description=None, cooking_steps=None):
    return {
        "id": menu_id,
        "name": name,
        "category": category,
        "calories": calories,
        "protein": protein,
        "carbs": carbs,
        "fat": fat,
        "ingredients": ingredients,
        "cooking_time": cooking_time,
        "difficulty": difficulty,
        "season": season,
        "description": description,
        "cooking_steps": cooking_steps,
    }


FOOD_MENU = [
    # Korean
    _menu("1", "현미밥과 된장찌개", "한식", 450, 18, 65, 12,
          ["현미", "두부", "된장", "애호박", "양파"], 30, "easy", "all",
          description="구수한 된장찌개와 건강한 현미밥의 조합",
          cooking_steps=[
              "현미를 씻어 30분 불린 후 밥솥에 넣고 취사합니다",
              "냄비에 물을 붓고 된장을 풀어줍니다",
              "두부와 애호박, 양파를 한입 크기로 썰어 넣습니다",
              "중불에서 10분간 끓인 후 대파를 넣고 마무리합니다",
          ]),
    _menu("2", "비빔밥", "한식", 520, 22, 75, 15,
          ["밥", "시금치", "콩나물", "당근", "고사리", "계란"], 40, "medium", "all",
          description="다양한 나물과 고추장이 어우러진 영양 만점 한식",
          cooking_steps=[
              "각각의 나물을 데쳐서 참기름과 소금으로 무칩니다",
              "당근은 채 썰어 살짝 볶아줍니다",
              "계란 후라이를 만듭니다",
              "따뜻한 밥 위에 나물들을 예쁘게 담고 계란을 얹습니다",
              "고추장과 참기름을 곁들여 비벼 먹습니다",
          ]),
    _menu("3", "삼계탕", "한식", 600, 45, 35, 25,
          ["닭", "인삼", "대추", "마늘", "찹쌀"], 90, "medium", "summer",
          description="여름 보양식의 대표 메뉴, 인삼과 닭고기의 영양이 가득",
          cooking_steps=[
              "영계를 깨끗이 씻고 내장을 제거합니다",
              "찹쌀, 대추, 마늘, 인삼을 닭 뱃속에 넣습니다",
              "냄비에 닭을 넣고 물을 자작하게 부어줍니다",
              "센 불로 끓이다가 끓어오르면 중불로 줄여 60분간 푹 끓입니다",
              "소금과 후추로 간을 맞춰 완성합니다",
          ]),
    _menu("4", "김치찌개", "한식", 380, 20, 28, 18,
          ["김치", "두부", "돼지고기", "대파"], 30, "easy", "all",
          description="묵은 김치로 끓인 얼큰하고 시원한 국물 요리",
          cooking_steps=[
              "김치와 돼지고기를 적당한 크기로 썰어줍니다",
              "냄비에 식용유를 두르고 돼지고기를 먼저 볶습니다",
              "김치를 넣고 함께 볶다가 물을 부어줍니다",
              "끓어오르면 두부를 넣고 15분간 더 끓입니다",
              "대파와 고춧가루를 넣어 마무리합니다",
          ]),
    _menu("5", "닭가슴살 샐러드", "한식", 280, 35, 15, 8,
          ["닭가슴살", "양상추", "토마토", "오이", "참깨드레싱"], 20, "easy", "all",
          description="고단백 저칼로리 다이어트 식단의 정석",
          cooking_steps=[
              "닭가슴살을 끓는 물에 삶아 익힙니다",
              "양상추, 토마토, 오이를 깨끗이 씻어 먹기 좋게 썰어줍니다",
              "삶은 닭가슴살을 손으로 찢거나 얇게 썰어줍니다",
              "접시에 채소를 담고 닭가슴살을 올린 뒤 참깨드레싱을 뿌립니다",
          ]),
    _menu("6", "두부김치", "한식", 320, 18, 25, 16, ["두부", "김치", "돼지고기", "대파"], 25, "easy", "all"),
    _menu("7", "콩나물국밥", "한식", 420, 20, 60, 10, ["콩나물", "밥", "달걀", "새우젓"], 30, "easy", "all"),
    _menu("8", "불고기", "한식", 480, 38, 35, 20, ["소고기", "양파", "당근", "대파", "간장"], 40, "medium", "all"),
    _menu("9", "된장국과 생선구이", "한식", 350, 32, 28, 12, ["고등어", "된장", "두부", "애호박"], 35, "medium", "all"),
    _menu("10", "냉면", "한식", 480, 18, 75, 12, ["메밀면", "오이", "배", "달걀", "육수"], 30, "medium", "summer"),
    _menu("11", "잡채", "한식", 420, 15, 55, 16, ["당면", "시금치", "당근", "목이버섯", "소고기"], 45, "medium", "all"),
    _menu("12", "미역국", "한식", 180, 12, 15, 8, ["미역", "소고기", "마늘", "참기름"], 30, "easy", "all"),
    _menu("13", "계란말이", "한식", 220, 18, 8, 14, ["계란", "당근", "파", "소금"], 15, "easy", "all"),
    _menu("14", "순두부찌개", "한식", 280, 16, 20, 15, ["순두부", "조개", "고춧가루", "대파"], 25, "easy", "all"),
    _menu("15", "김밥", "한식", 380, 14, 58, 12, ["김", "밥", "단무지", "시금치", "당근", "햄"], 35, "medium", "all"),
    _menu("16", "떡국", "한식", 420, 18, 62, 12, ["떡", "소고기", "달걀", "김"], 40, "medium", "winter"),
    _menu("17", "제육볶음", "한식", 520, 32, 38, 25, ["돼지고기", "양파", "고추장", "대파"], 30, "medium", "all"),
    _menu("18", "북어국", "한식", 180, 22, 12, 6, ["북어", "두부", "달걀", "대파"], 35, "easy", "winter"),
    _menu("19", "갈비찜", "한식", 650, 42, 48, 32, ["소갈비", "당근", "밤", "대추", "간장"], 90, "hard", "all"),
    _menu("20", "나물 비빔밥", "한식", 450, 16, 68, 12, ["밥", "시금치", "도라지", "고사리", "고추장"], 45, "medium", "spring"),
    _menu("21", "해물파전", "한식", 480, 24, 52, 18, ["밀가루", "오징어", "새우", "파", "달걀"], 30, "medium", "all"),
    _menu("22", "참치김치찌개", "한식", 320, 28, 22, 14, ["참치", "김치", "두부", "대파"], 25, "easy", "all"),
    _menu("23", "오징어볶음", "한식", 380, 32, 28, 16, ["오징어", "양파", "고추장", "당근"], 25, "medium", "all"),
    _menu("24", "청국장찌개", "한식", 350, 22, 32, 15, ["청국장", "두부", "김치", "대파"], 30, "easy", "winter"),
    _menu("25", "쌈밥", "한식", 420, 18, 55, 14, ["밥", "상추", "쌈장", "고추", "마늘"], 20, "easy", "spring"),
    _menu("26", "육개장", "한식", 480, 35, 38, 20, ["소고기", "고사리", "대파", "고춧가루"], 60, "medium", "summer"),
    _menu("27", "동태찌개", "한식", 320, 28, 22, 12, ["동태", "두부", "무", "고춧가루"], 35, "easy", "winter"),
    _menu("28", "계란찜", "한식", 180, 14, 6, 12, ["계란", "새우젓", "대파"], 15, "easy", "all"),
    _menu("29", "호박전", "한식", 280, 10, 38, 10, ["애호박", "밀가루", "달걀", "소금"], 25, "easy", "summer"),
    _menu("30", "닭볶음탕", "한식", 580, 42, 45, 24, ["닭", "감자", "당근", "고추장", "대파"], 50, "medium", "all"),

    # Western
    _menu("31", "그릴드 치킨 샐러드", "양식", 420, 45, 25, 16,
          ["닭가슴살", "로메인", "토마토", "파마산치즈", "시저드레싱"], 30, "easy", "all",
          description="구운 닭가슴살과 신선한 채소의 완벽한 조화",
          cooking_steps=[
              "닭가슴살에 소금, 후추로 밑간을 합니다",
              "그릴 팬을 달궈 닭가슴살을 앞뒤로 7분씩 굽습니다",
              "로메인과 토마토를 깨끗이 씻어 물기를 뺍니다",
              "구운 닭가슴살을 먹기 좋게 슬라이스합니다",
              "접시에 채소를 담고 닭가슴살을 올린 후 시저드레싱과 파마산치즈를 뿌립니다",
          ]),
    _menu("32", "연어 스테이크", "양식", 520, 48, 32, 22,
          ["연어", "아스파라거스", "레몬", "올리브오일"], 25, "medium", "all",
          description="오메가-3가 풍부한 연어와 신선한 채소",
          cooking_steps=[
              "연어에 소금, 후추로 간을 합니다",
              "팬에 올리브오일을 두르고 연어를 껍질 면부터 굽습니다",
              "껍질이 바삭해지면 뒤집어 3분 더 굽습니다",
              "아스파라거스를 같은 팬에 소금, 올리브오일과 함께 볶습니다",
              "접시에 담고 레몬을 곁들여 완성합니다",
          ]),
    _menu("33", "치킨 브레스트 구이", "양식", 380, 52, 18, 12,
          ["닭가슴살", "브로콜리", "마늘", "허브"], 35, "easy", "all",
          description="허브 향이 가득한 건강한 닭가슴살 요리",
          cooking_steps=[
              "닭가슴살을 두드려 두께를 고르게 만듭니다",
              "소금, 후추, 다진 마늘, 허브로 마리네이드합니다",
              "예열한 오븐 팬에 닭가슴살을 올립니다",
              "180도 오븐에서 25분간 굽습니다",
              "브로콜리를 데쳐서 함께 곁들입니다",
          ]),
    _menu("34", "퀴노아 볼", "양식", 450, 20, 62, 14, ["퀴노아", "아보카도", "방울토마토", "병아리콩"], 30, "easy", "all"),
    _menu("35", "그릭 요거트 파르페", "양식", 280, 18, 38, 8, ["그릭요거트", "그래놀라", "베리", "꿀"], 10, "easy", "all"),
    _menu("36", "터키 샌드위치", "양식", 420, 32, 45, 14, ["칠면조", "통밀빵", "양상추", "토마토", "머스타드"], 15, "easy", "all"),
    _menu("37", "새우 파스타", "양식", 580, 28, 72, 20, ["새우", "파스타", "마늘", "올리브오일", "파슬리"], 30, "medium", "all"),
    _menu("38", "미네스트로네 수프", "양식", 220, 12, 35, 6, ["토마토", "콩", "파스타", "채소"], 40, "medium", "winter"),
    _menu("39", "구운 야채 샐러드", "양식", 280, 8, 38, 12, ["호박", "파프리카", "가지", "발사믹"], 35, "easy", "all"),
    _menu("40", "오믈렛", "양식", 320, 24, 12, 20, ["계란", "버섯", "치즈", "시금치"], 15, "easy", "all"),
    _menu("41", "터키 칠리", "양식", 480, 38, 48, 16, ["칠면조 간 고기", "검은콩", "토마토", "고추"], 45, "medium", "all"),
    _menu("42", "참치 샐러드", "양식", 340, 32, 22, 14, ["참치", "믹스그린", "올리브", "레몬드레싱"], 15, "easy", "all"),
    _menu("43", "스테이크와 구운 감자", "양식", 650, 48, 52, 28, ["소고기", "감자", "로즈마리", "마늘"], 45, "medium", "all"),
    _menu("44", "새우 아보카도 샐러드", "양식", 380, 28, 24, 20, ["새우", "아보카도", "양상추", "라임"], 20, "easy", "all"),
    _menu("45", "토마토 바질 파스타", "양식", 520, 18, 78, 16, ["파스타", "토마토", "바질", "마늘", "올리브오일"], 25, "easy", "summer"),
    _menu("46", "렌틸콩 수프", "양식", 320, 20, 48, 6, ["렌틸콩", "당근", "셀러리", "양파"], 50, "easy", "winter"),
    _menu("47", "구운 닭다리", "양식", 480, 42, 28, 22, ["닭다리", "감자", "당근", "허브"], 60, "medium", "all"),
    _menu("48", "에그 베네딕트", "양식", 520, 28, 42, 26, ["잉글리시머핀", "계란", "베이컨", "홀랜다이즈소스"], 25, "hard", "all"),
    _menu("49", "시저 샐러드", "양식", 380, 22, 28, 20, ["로메인", "크루통", "파마산", "시저드레싱", "닭가슴살"], 20, "easy", "all"),
    _menu("50", "브로콜리 수프", "양식", 220, 12, 28, 8, ["브로콜리", "양파", "우유", "치즈"], 30, "easy", "winter"),

    # Chinese
    _menu("51", "닭가슴살 야채볶음", "중식", 420, 38, 35, 16,
          ["닭가슴살", "브로콜리", "파프리카", "간장"], 25, "easy", "all",
          description="고단백 저지방의 건강한 중식 볶음 요리",
          cooking_steps=[
              "닭가슴살을 한입 크기로 썰어 간장, 전분으로 밑간합니다",
              "브로콜리와 파프리카를 먹기 좋게 썰어줍니다",
              "센 불에 기름을 두르고 닭가슴살을 먼저 볶습니다",
              "닭고기가 익으면 야채를 넣고 빠르게 볶아줍니다",
              "굴소스와 간장으로 간을 맞춰 완성합니다",
          ]),
    _menu("52", "두부 마파두부", "중식", 380, 22, 28, 20,
          ["두부", "돼지고기", "고추", "두반장"], 30, "medium", "all",
          description="얼큰하고 매콤한 사천식 두부 요리",
          cooking_steps=[
              "두부를 깍둑썰기하고 소금물에 데칩니다",
              "다진 돼지고기를 기름에 볶다가 두반장을 넣습니다",
              "고춧가루와 마늘을 넣고 향을 냅니다",
              "물과 간장을 넣고 끓이다가 두부를 넣습니다",
              "전분물로 농도를 맞추고 파를 뿌려 마무리합니다",
          ]),
    _menu("53", "새우 볶음밥", "중식", 520, 24, 68, 18,
          ["새우", "밥", "계란", "완두콩", "당근"], 20, "easy", "all",
          description="간단하지만 맛있는 중식 볶음밥의 기본",
          cooking_steps=[
              "새우는 손질하여 준비하고, 야채는 잘게 다집니다",
              "센 불에 기름을 두르고 계란을 스크램블합니다",
              "새우와 야채를 넣고 빠르게 볶습니다",
              "찬 밥을 넣고 주걱으로 으깨며 볶아줍니다",
              "간장과 소금으로 간을 맞춰 완성합니다",
          ]),
    _menu("54", "짬뽕", "중식", 580, 28, 72, 20, ["면", "해물", "양배추", "고춧가루"], 35, "medium", "all"),
    _menu("55", "팔보채", "중식", 480, 32, 42, 20, ["해산물", "야채", "전분", "간장"], 30, "medium", "all"),
    _menu("56", "깐풍기", "중식", 520, 35, 48, 22, ["닭고기", "고추", "마늘", "간장", "설탕"], 35, "medium", "all"),
    _menu("57", "탕수육", "중식", 620, 32, 68, 26, ["돼지고기", "전분", "파인애플", "소스"], 40, "medium", "all"),
    _menu("58", "볶음우동", "중식", 520, 22, 72, 16, ["우동면", "야채", "간장", "굴소스"], 20, "easy", "all"),
    _menu("59", "고추잡채", "중식", 420, 18, 55, 14, ["당면", "고추", "돼지고기", "간장"], 30, "medium", "all"),
    _menu("60", "양장피", "중식", 380, 24, 42, 14, ["해파리", "오이", "당면", "겨자소스"], 35, "medium", "summer"),
    _menu("61", "유산슬", "중식", 420, 28, 38, 18, ["해산물", "야채", "전분", "굴소스"], 30, "medium", "all"),
    _menu("62", "동파육", "중식", 680, 38, 42, 38, ["돼지고기", "간장", "설탕", "팔각"], 120, "hard", "winter"),
    _menu("63", "중국식 만두", "중식", 480, 22, 58, 18, ["밀가루", "돼지고기", "부추", "간장"], 45, "medium", "all"),
    _menu("64", "라조기", "중식", 520, 36, 45, 22, ["닭고기", "고추", "땅콩", "간장"], 30, "medium", "all"),
    _menu("65", "양꼬치", "중식", 580, 42, 28, 32, ["양고기", "양파", "향신료"], 40, "medium", "all"),

    # Japanese
    _menu("66", "연어 사시미", "일식", 320, 38, 12, 14,
          ["연어", "와사비", "간장", "무"], 15, "easy", "all",
          description="신선한 연어의 풍미를 그대로 느낄 수 있는 일식",
          cooking_steps=[
              "신선한 연어를 준비하고 껍질과 뼈를 제거합니다",
              "연어를 사시미 칼로 얇게 슬라이스합니다",
              "무를 가늘게 채 썰어 접시에 깔아줍니다",
              "연어 사시미를 예쁘게 담습니다",
              "와사비와 간장을 곁들여 냅니다",
          ]),
    _menu("67", "초밥", "일식", 420, 24, 68, 8,
          ["밥", "생선", "김", "와사비"], 40, "hard", "all",
          description="일본 전통 요리의 정수를 담은 스시",
          cooking_steps=[
              "밥에 초밥 식초를 섞어 초밥용 밥을 만듭니다",
              "생선을 얇게 슬라이스합니다",
              "손에 식초물을 묻히고 밥을 적당량 쥡니다",
              "와사비를 살짝 바르고 생선을 올립니다",
              "모양을 잡아 초밥을 완성하고 간장과 함께 냅니다",
          ]),
    _menu("68", "돈까스", "일식", 620, 38, 58, 28, ["돼지고기", "빵가루", "양배추", "소스"], 35, "medium", "all"),
    _menu("69", "우동", "일식", 380, 16, 68, 6, ["우동면", "육수", "파", "유부"], 25, "easy", "all"),
    _menu("70", "덮밥 (규동)", "일식", 580, 32, 75, 18, ["소고기", "밥", "양파", "간장"], 30, "easy", "all"),
    _menu("71", "라멘", "일식", 620, 28, 78, 22, ["면", "돼지고기", "계란", "파", "육수"], 45, "medium", "all"),
    _menu("72", "테리야키 치킨", "일식", 480, 42, 38, 16, ["닭고기", "간장", "미림", "설탕"], 35, "easy", "all"),
    _menu("73", "미소 된장국", "일식", 80, 6, 10, 2, ["된장", "두부", "미역", "파"], 15, "easy", "all"),
    _menu("74", "장어덮밥", "일식", 680, 38, 82, 22, ["장어", "밥", "소스", "김"], 40, "medium", "summer"),
    _menu("75", "오코노미야키", "일식", 520, 22, 62, 20, ["밀가루", "양배추", "돼지고기", "계란", "소스"], 30, "medium", "all"),
    _menu("76", "모둠튀김", "일식", 580, 24, 58, 28, ["새우", "야채", "튀김가루", "소스"], 35, "medium", "all"),
    _menu("77", "가츠동", "일식", 720, 42, 78, 28, ["돈까스", "밥", "계란", "양파"], 40, "medium", "all"),
    _menu("78", "차완무시", "일식", 180, 14, 12, 8, ["계란", "새우", "버섯", "육수"], 25, "medium", "all"),
    _menu("79", "야키소바", "일식", 520, 20, 72, 16, ["중화면", "양배추", "돼지고기", "소스"], 25, "easy", "all"),
    _menu("80", "연어 구이", "일식", 420, 42, 18, 20, ["연어", "레몬", "소금", "후추"], 20, "easy", "all"),

    # salads, smoothies, snacks, desserts
    _menu("81", "코브 샐러드", "샐러드", 480, 38, 22, 28, ["닭가슴살", "베이컨", "아보카도", "달걀", "블루치즈"], 25, "easy", "all"),
    _menu("82", "카프레제 샐러드", "샐러드", 320, 18, 12, 22, ["토마토", "모짜렐라", "바질", "발사믹"], 10, "easy", "summer"),
    _menu("83", "니코이즈 샐러드", "샐러드", 420, 32, 28, 20, ["참치", "감자", "올리브", "계란", "그린빈"], 30, "medium", "all"),
    _menu("84", "퀴노아 샐러드", "샐러드", 380, 16, 48, 14, ["퀴노아", "오이", "토마토", "페타치즈", "레몬"], 30, "easy", "all"),
    _menu("85", "칠리 라임 새우 샐러드", "샐러드", 340, 32, 22, 16, ["새우", "믹스그린", "망고", "라임", "칠리"], 20, "easy", "summer"),
    _menu("86", "그릭 샐러드", "샐러드", 320, 12, 18, 22, ["오이", "토마토", "올리브", "페타치즈", "양파"], 15, "easy", "all"),
    _menu("87", "케일 샐러드", "샐러드", 280, 14, 28, 14, ["케일", "크랜베리", "호두", "파마산", "레몬드레싱"], 15, "easy", "all"),
    _menu("88", "발사믹 닭가슴살 샐러드", "샐러드", 380, 42, 24, 14, ["닭가슴살", "믹스그린", "방울토마토", "발사믹"], 25, "easy", "all"),
    _menu("89", "훈제연어 샐러드", "샐러드", 420, 28, 22, 24, ["훈제연어", "루꼴라", "케이퍼", "크림치즈"], 15, "easy", "all"),
    _menu("90", "두부 샐러드", "샐러드", 280, 18, 22, 14, ["두부", "양상추", "토마토", "참깨드레싱"], 20, "easy", "all"),
    _menu("91", "베리 스무디", "스무디", 220, 8, 42, 4, ["블루베리", "딸기", "바나나", "그릭요거트"], 10, "easy", "all"),
    _menu("92", "그린 스무디", "스무디", 180, 6, 35, 3, ["시금치", "바나나", "사과", "아몬드우유"], 10, "easy", "all"),
    _menu("93", "단백질 쉐이크", "스무디", 280, 32, 28, 6, ["단백질파우더", "바나나", "아몬드우유", "땅콩버터"], 5, "easy", "all"),
    _menu("94", "아보카도 토스트", "간식", 320, 12, 38, 16, ["통밀빵", "아보카도", "계란", "토마토"], 15, "easy", "all"),
    _menu("95", "그래놀라 볼", "간식", 380, 16, 52, 12, ["그래놀라", "그릭요거트", "베리", "꿀"], 10, "easy", "all"),
    _menu("96", "땅콩버터 바나나 토스트", "간식", 340, 14, 45, 14, ["통밀빵", "땅콩버터", "바나나"], 10, "easy", "all"),
    _menu("97", "후무스와 야채 스틱", "간식", 220, 10, 28, 8, ["병아리콩", "타히니", "당근", "셀러리"], 15, "easy", "all"),
    _menu("98", "과일 샐러드", "디저트", 180, 2, 42, 2, ["딸기", "키위", "파인애플", "망고", "민트"], 15, "easy", "summer"),
    _menu("99", "오트밀 쿠키", "디저트", 280, 8, 42, 10, ["오트밀", "바나나", "계란", "건포도"], 30, "easy", "all"),
    _menu("100", "치아씨드 푸딩", "디저트", 240, 10, 32, 10, ["치아씨드", "아몬드우유", "꿀", "베리"], 120, "easy", "all"),
]


def _exercise(exercise_id, name, met, category, difficulty, description):
    return {
        "id": exercise_id,
        "name": name,
        "met": met,
        "category": category,
        "difficulty": difficulty,
        "description": description,
    }


# MET x weight(kg) x hours = kcal
EXERCISES = [
    _exercise("1", "걷기 (느린 속도)", 3.5, "aerobic", "easy", "3-4km/h 속도"),
    _exercise("2", "걷기 (빠른 속도)", 5.0, "aerobic", "medium", "5-6km/h 속도"),
    _exercise("3", "조깅", 7.0, "aerobic", "medium", "8km/h 속도"),
    _exercise("4", "달리기", 10.0, "aerobic", "hard", "10km/h 이상"),
    _exercise("5", "자전거 (느린 속도)", 4.0, "aerobic", "easy", "16km/h 미만"),
    _exercise("6", "자전거 (빠른 속도)", 8.0, "aerobic", "medium", "20km/h 이상"),
    _exercise("7", "수영 (천천히)", 6.0, "aerobic", "medium", "자유형, 느린 속도"),
    _exercise("8", "수영 (빠르게)", 10.0, "aerobic", "hard", "자유형, 빠른 속도"),
    _exercise("9", "등산", 7.5, "aerobic", "medium", "배낭 없이"),
    _exercise("10", "계단 오르기", 8.0, "aerobic", "medium", "일반 속도"),

    _exercise("11", "웨이트 트레이닝 (가벼움)", 3.5, "strength", "easy", "가벼운 중량"),
    _exercise("12", "웨이트 트레이닝 (보통)", 5.0, "strength", "medium", "중간 중량"),
    _exercise("13", "웨이트 트레이닝 (격렬)", 6.0, "strength", "hard", "고중량"),
    _exercise("14", "팔굽혀펴기", 3.8, "strength", "medium", "자중 운동"),
    _exercise("15", "윗몸일으키기", 3.8, "strength", "medium", "복근 운동"),
    _exercise("16", "플랭크", 4.0, "strength", "medium", "코어 운동"),
    _exercise("17", "스쿼트", 5.0, "strength", "medium", "하체 운동"),
    _exercise("18", "런지", 4.0, "strength", "medium", "하체 운동"),

    _exercise("19", "농구", 6.5, "sport", "medium", "일반 게임"),
    _exercise("20", "축구", 7.0, "sport", "medium", "일반 게임"),
    _exercise("21", "배드민턴", 5.5, "sport", "medium", "레크리에이션"),
    _exercise("22", "테니스", 7.3, "sport", "medium", "단식"),
    _exercise("23", "탁구", 4.0, "sport", "easy", "레크리에이션"),
    _exercise("24", "배구", 4.0, "sport", "medium", "레크리에이션"),
    _exercise("25", "골프", 4.8, "sport", "easy", "걸으며 플레이"),

    _exercise("26", "요가", 2.5, "other", "easy", "하타 요가"),
    _exercise("27", "필라테스", 3.0, "other", "medium", "일반 강도"),
    _exercise("28", "줄넘기", 11.0, "aerobic", "hard", "빠른 속도"),
    _exercise("29", "에어로빅", 6.5, "aerobic", "medium", "고강도"),
    _exercise("30", "댄스", 4.5, "other", "medium", "일반 댄스"),
]


# ---------------------------------------------------------
# Menu lookups
# ---------------------------------------------------------
def get_menus_by_category(category, catalog=None):
    catalog = FOOD_MENU if catalog is None else catalog
    return [m for m in catalog if m["category"] == category]


def get_menus_by_season(season, catalog=None):
    """Menus tagged with ``season`` plus the all-season ones."""
    catalog = FOOD_MENU if catalog is None else catalog
    return [m for m in catalog if m["season"] in (season, "all")]


def get_menus_by_calories(min_cal, max_cal, catalog=None):
    catalog = FOOD_MENU if catalog is None else catalog
    return [m for m in catalog if min_cal <= m["calories"] <= max_cal]


def find_menu_by_name(name, catalog=None):
    """
    Resolve a free-text food name against the menu.

    Exact name first, then a menu whose name contains the text,
    then a menu name that appears inside the text.
    """
    catalog = FOOD_MENU if catalog is None else catalog
    return _find_by_name(name, catalog)


# ---------------------------------------------------------
# Exercise lookups
# ---------------------------------------------------------
def get_exercises_by_category(category, catalog=None):
    catalog = EXERCISES if catalog is None else catalog
    return [e for e in catalog if e["category"] == category]


def get_exercise_by_id(exercise_id, catalog=None):
    catalog = EXERCISES if catalog is None else catalog
    for exercise in catalog:
        if exercise["id"] == exercise_id:
            return exercise
    return None


def search_exercises(query, catalog=None):
    catalog = EXERCISES if catalog is None else catalog
    q = (query or "").lower()
    return [
        e for e in catalog
        if q in e["name"].lower() or q in e["description"].lower()
    ]


def find_exercise_by_name(name, catalog=None):
    catalog = EXERCISES if catalog is None else catalog
    return _find_by_name(name, catalog)


def _find_by_name(name, catalog):
    text = (name or "").strip().lower()
    if not text:
        return None

    for entry in catalog:
        if entry["name"].lower() == text:
            return entry
    for entry in catalog:
        if text in entry["name"].lower():
            return entry
    # longest contained name wins
    contained = [e for e in catalog if e["name"].lower() in text]
    if contained:
        return max(contained, key=lambda e: len(e["name"]))
    return None
