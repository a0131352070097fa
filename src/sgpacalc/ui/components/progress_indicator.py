import flet as ft

from sgpacalc.state.wizard_state import Progress


def build_progress_indicator(progress: Progress) -> ft.Card:
    labels = [
        ft.Text(
            label,
            size=12,
            color=ft.Colors.BLUE_600 if progress.reached(index) else ft.Colors.GREY_500,
        )
        for index, label in enumerate(progress.labels)
    ]

    return ft.Card(
        content=ft.Container(
            padding=16,
            content=ft.Column(
                spacing=10,
                controls=[
                    ft.Row(
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                        controls=[
                            ft.Text("Progress", size=13, color=ft.Colors.GREY_700),
                            ft.Text(progress.caption, size=13, color=ft.Colors.BLUE_600),
                        ],
                    ),
                    ft.ProgressBar(value=progress.fraction, color=ft.Colors.BLUE_600, bgcolor=ft.Colors.GREY_200),
                    ft.Row(alignment=ft.MainAxisAlignment.SPACE_BETWEEN, controls=labels),
                ],
            ),
        )
    )
