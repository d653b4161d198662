"""Shared fixtures: a small but realistic InDesign snippet export."""

import pytest

BODY_FIRST = (
    "Heavy rain and wind swept across campus on Tuesday night, knocking out power "
    "to several residence halls."
)
BODY_SECOND = "Facilities crews worked through the night to restore service."

SAMPLE_SNIPPET = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<?aid style="50" type="snippet" readerVersion="6.0" featureSet="513" product="13.0(164)" ?>
<?aid SnippetType="PageItem"?>
<Document DOMVersion="13.0" Self="d">
  <Color Self="Color/Black" Model="Process" Space="CMYK" ColorValue="0 0 0 100"/>
  <Story Self="u1a2" AppliedTOCStyle="n" TrackChanges="false">
    <StoryPreference OpticalMarginAlignment="false" FrameType="TextFrameType"/>
    <ParagraphStyleRange AppliedParagraphStyle="ParagraphStyle/Kicker">
      <CharacterStyleRange AppliedCharacterStyle="CharacterStyle/$ID/[No character style]">
        <Content>Weather</Content>
      </CharacterStyleRange>
    </ParagraphStyleRange>
    <ParagraphStyleRange AppliedParagraphStyle="ParagraphStyle/Headline Default">
      <CharacterStyleRange AppliedCharacterStyle="CharacterStyle/$ID/[No character style]">
        <Content>Storm Hits Campus</Content>
      </CharacterStyleRange>
    </ParagraphStyleRange>
    <ParagraphStyleRange AppliedParagraphStyle="ParagraphStyle/Author">
      <CharacterStyleRange AppliedCharacterStyle="CharacterStyle/$ID/[No character style]">
        <Content>Jordan Lee</Content>
      </CharacterStyleRange>
    </ParagraphStyleRange>
    <ParagraphStyleRange AppliedParagraphStyle="ParagraphStyle/Author Job">
      <CharacterStyleRange AppliedCharacterStyle="CharacterStyle/$ID/[No character style]">
        <Content>Senior Reporter, </Content>
      </CharacterStyleRange>
      <CharacterStyleRange AppliedCharacterStyle="CharacterStyle/$ID/[No character style]" FontStyle="Regular">
        <Content>The Polytechnic</Content>
      </CharacterStyleRange>
    </ParagraphStyleRange>
    <ParagraphStyleRange AppliedParagraphStyle="ParagraphStyle/Body Text">
      <CharacterStyleRange AppliedCharacterStyle="CharacterStyle/$ID/[No character style]">
        <Content>{BODY_FIRST}\t{BODY_SECOND}</Content>
      </CharacterStyleRange>
    </ParagraphStyleRange>
  </Story>
  <Story Self="u1b7" AppliedTOCStyle="n">
    <ParagraphStyleRange AppliedParagraphStyle="ParagraphStyle/Photo Byline">
      <CharacterStyleRange AppliedCharacterStyle="CharacterStyle/$ID/[No character style]">
        <Content>Sam Rivera</Content>
      </CharacterStyleRange>
    </ParagraphStyleRange>
    <ParagraphStyleRange AppliedParagraphStyle="ParagraphStyle/Caption">
      <CharacterStyleRange AppliedCharacterStyle="CharacterStyle/$ID/[No character style]">
        <Content>Flooding outside the Union.</Content>
      </CharacterStyleRange>
    </ParagraphStyleRange>
  </Story>
  <Rectangle Self="u1c0" ContentType="GraphicType">
    <Image Self="u1c1">
      <Link Self="u1c2" LinkResourceURI="file:///Volumes/GoogleDrive/Team%20Drives/The%20Polytechnic/Photos/storm.jpg" StoredState="Normal"/>
    </Image>
  </Rectangle>
</Document>
"""


@pytest.fixture
def sample_snippet_bytes() -> bytes:
    return SAMPLE_SNIPPET.encode("utf-8")


@pytest.fixture
def sample_body_html() -> str:
    return f"<p>{BODY_FIRST}</p><p>{BODY_SECOND}</p>"
