"""SpeedRead: RSVP (Rapid Serial Visual Presentation) speed reader.

WHY: Reading one word at a time, with the eye parked on a fixed fixation
point, removes saccades and lets readers push well past their normal
reading rate. The hard part is timing: each word must stay on screen long
enough for its length and for the punctuation that ends it.

HOW: Two layers:
  core       : tokenizer, ORP/delay policy and the playback scheduler
  host side  : renderers, text sources, rate preferences and the CLI

RULES:
- The core never reads files, renders or persists anything
- Host modules talk to the core only through RSVPEngine's public methods
"""

__version__ = "0.1.0"
