from __future__ import annotations
import logging
from quiz_core.session import QuizSession, SelectionError
def ask(question) -> list[str]:
    print(f"\n[{question.order}] {question.question_text}")
    for i, opt in enumerate(question.options): print(f"  [{i}] {opt.option_text}")
    need = question.max_selections
    hint = "Your choice (index): " if need == 1 else "Top two, best first (e.g. 2 0): "
    while True:
        raw = input(hint).replace(",", " ").split()
        if all(v.isdigit() and int(v) < len(question.options) for v in raw) and len(raw) == need:
            return [question.options[int(v)].option_id for v in raw]
        print(f"Enter {need} valid index(es).")
def main():
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    print("Personality Quiz")
    session = QuizSession()
    while session.current_question is not None:
        try: session.answer(ask(session.current_question))
        except SelectionError as e: print(e)
    outcome = session.finish(); pt = outcome.personality_type
    if pt is None:
        print("No result."); return
    print(f"\nYou are: {pt.title} ({pt.id})\n{pt.short_description}")
    for s in pt.superpower_list: print(f"  * {s}")
    for c in pt.recommended_careers[:4]: print(f"  - {c.title}: {c.description}")
if __name__ == "__main__": main()
