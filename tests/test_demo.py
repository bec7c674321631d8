import asyncio

from conftest import FakeGenerationClient

from src.infrastructure.entrypoints.demo import run


def test_demo_answers_heart_question(capsys):
    client = FakeGenerationClient(reply="Exercise and cardio strengthen the heart.")

    answer = asyncio.run(run(client))

    assert answer == "Exercise and cardio strengthen the heart."
    prompt = client.prompts[0]
    exercise = prompt.index("- Regular exercise is crucial for cardiovascular health.")
    cardio = prompt.index("- Cardio workouts like running or swimming help strengthen the heart.")
    assert exercise < cardio
    assert "water intake" not in prompt
    assert "How can I improve my heart health?" in capsys.readouterr().out
