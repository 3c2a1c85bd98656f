from og_cards.baby_name import BabyNameCard
from og_cards.og_base import BRAND_TEXT
from og_cards.word_of_day import TITLE, WordOfDayCard

FONT = 'font-family="system-ui, -apple-system, sans-serif"'


def text_at(y, size):
    return f'y="{y}" {FONT} font-size="{size}"'


def test_frame_is_fixed_canvas_with_branding():
    for card in (BabyNameCard(name='Asha'), WordOfDayCard(sanskrit='x')):
        svg = card.render()
        assert svg.startswith('<svg width="1200" height="630" viewBox="0 0 1200 630"')
        assert svg.endswith('</svg>')
        assert 'stroke-width="4"' in svg
        assert f'>{BRAND_TEXT}</text>' in svg


def test_baby_name_renders_name_and_pronunciation():
    svg = BabyNameCard(name='Asha', pronunciation='AH-shah', meaning='Hope').render()
    assert '>Asha</text>' in svg
    assert '>AH-shah</text>' in svg
    assert 'font-size="72" font-weight="bold"' in svg
    assert 'font-style="italic"' in svg
    assert text_at(360, 28) in svg
    assert 'font-size="22"' not in svg


def test_baby_name_meaning_lines_advance_35():
    meaning = ' '.join(['word'] * 20)  # 12 words fit in 60 chars
    svg = BabyNameCard(name='A', meaning=meaning).render()
    assert text_at(360, 28) in svg
    assert text_at(395, 28) in svg
    assert text_at(430, 28) not in svg


def test_baby_name_story_starts_after_meaning_block():
    meaning = ' '.join(['word'] * 20)
    story = ' '.join(['tale'] * 20)  # 16 words fit in 80 chars
    svg = BabyNameCard(name='A', meaning=meaning, story=story).render()
    assert text_at(460, 22) in svg
    assert text_at(488, 22) in svg
    assert svg.count('font-size="22"') == 2


def test_story_offset_exceeds_meaning_block():
    card = BabyNameCard()
    for count in range(5):
        assert card.story_offset(count) > 360 + count * 35


def test_story_without_meaning():
    svg = BabyNameCard(name='A', story='once upon a time').render()
    assert text_at(390, 22) in svg
    assert 'font-size="28"' not in svg


def test_gender_is_not_drawn():
    assert BabyNameCard(name='Asha', gender='girl').render() == BabyNameCard(name='Asha').render()


def test_baby_name_escapes_every_field():
    svg = BabyNameCard(
        name='<b>', pronunciation='"p"', meaning='<script>alert(1)</script>', story="it's & more"
    ).render()
    assert '<script>' not in svg
    assert '&lt;script&gt;alert(1)&lt;/script&gt;' in svg
    assert '>&lt;b&gt;</text>' in svg
    assert '>&quot;p&quot;</text>' in svg
    assert 'it&apos;s &amp; more' in svg


def test_render_is_deterministic():
    a = BabyNameCard(name='Asha', pronunciation='AH-shah', meaning='Hope', story='A story')
    b = BabyNameCard(name='Asha', pronunciation='AH-shah', meaning='Hope', story='A story')
    assert a.render() == b.render()
    assert WordOfDayCard('धर्म', 'dharma', 'duty').render() == WordOfDayCard('धर्म', 'dharma', 'duty').render()


def test_word_card_layout():
    svg = WordOfDayCard(sanskrit='धर्म', transliteration='dharma', meaning='duty, righteousness').render()
    assert f'>{TITLE}</text>' in svg
    assert '>धर्म</text>' in svg
    assert 'font-size="90" font-weight="bold"' in svg
    assert '>dharma</text>' in svg
    assert text_at(420, 28) in svg
    assert svg.count('font-size="28"') == 1


def test_word_card_meaning_lines_advance_32():
    meaning = ' '.join(['word'] * 30)  # 14 words fit in 70 chars
    svg = WordOfDayCard(meaning=meaning).render()
    assert svg.count('font-size="28"') == 3
    assert text_at(452, 28) in svg
    assert text_at(484, 28) in svg


def test_from_query_defaults_to_empty_strings():
    card = WordOfDayCard.from_query('42', {})
    assert card == WordOfDayCard('', '', '')
    baby = BabyNameCard.from_query('', {})
    assert baby.name == '' and baby.story == ''


def test_baby_name_from_query_slug_fallback():
    assert BabyNameCard.from_query('priya-rose', {}).name == 'priya rose'
    assert BabyNameCard.from_query('priya-rose', {'name': ''}).name == 'priya rose'
    assert BabyNameCard.from_query('priya-rose', {'name': 'Priya'}).name == 'Priya'
