"""Interactive menu for monitoring a house's energy consumption."""

from __future__ import annotations

import sys
from typing import TextIO

from consumo.house import House
from consumo.room import Room

_NO_ROOMS = "Nenhum comodo cadastrado. Adicione um comodo primeiro."
_INVALID = "Opcao invalida! Tente novamente."


class System:
    """Text menu over a house, reading answers line by line."""

    def __init__(
        self,
        house: House | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.house = House() if house is None else house
        self._in = sys.stdin if stdin is None else stdin
        self._out = sys.stdout if stdout is None else stdout

    def _say(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out)

    def _ask(self, prompt: str) -> str | None:
        self._say(prompt, end="")
        self._out.flush()
        line = self._in.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def _ask_option(self, prompt: str) -> int | None:
        """Read a menu option; -1 for unreadable input, None at end of input."""
        answer = self._ask(prompt)
        if answer is None:
            return None
        try:
            return int(answer.strip())
        except ValueError:
            return -1

    def run(self) -> None:
        """Show the welcome screen and run the main menu until exit or end of input."""
        self._say("Bem-vindo ao sistema de monitoramento de energia!")
        self._main_menu()

    def _main_menu(self) -> None:
        while True:
            self._say()
            self._say("===== Sistema de Consumo Energetico =====")
            self._say("1. Listar comodos e consumo")
            self._say("2. Exibir consumo total da casa")
            self._say("3. Adicionar novo comodo")
            self._say("4. Excluir comodo")
            self._say("5. Acessar comodo")
            self._say("6. Sair")
            option = self._ask_option("Digite o numero da opcao desejada: ")
            if option is None:
                return
            if option == 1:
                self.house.print_rooms(self._out)
            elif option == 2:
                self._say(f"Consumo total da casa: {self.house.total_consumption():g} kWh")
            elif option == 3:
                name = self._ask("Digite o nome do novo comodo: ")
                if name is None:
                    return
                self.house.add_room(Room(name))
                self._say("Comodo adicionado com sucesso!")
            elif option == 4:
                if not self.house.rooms:
                    self._say(_NO_ROOMS)
                    continue
                self.house.print_rooms(self._out)
                name = self._ask("Digite o nome do comodo que voce deseja excluir: ")
                if name is None:
                    return
                self.house.remove_room(name)
                self._say("Comodo removido com sucesso!")
            elif option == 5:
                if not self.house.rooms:
                    self._say(_NO_ROOMS)
                    continue
                self.house.print_rooms(self._out)
                name = self._ask("Digite o nome do comodo que voce deseja acessar: ")
                if name is None:
                    return
                try:
                    room = self.house.get_room(name)
                except KeyError:
                    self._say("Comodo nao encontrado.")
                    continue
                if not self._room_menu(room):
                    return
            elif option == 6:
                self._say("Encerrando o programa...")
                return
            else:
                self._say(_INVALID)

    def _room_menu(self, room: Room) -> bool:
        """Run the menu of one room; False if input ended."""
        while True:
            self._say()
            self._say(f"== Menu do comodo: {room.name} ==")
            self._say("1. Exibir eletrodomesticos")
            self._say("2. Exibir consumo do comodo")
            self._say("3. Adicionar eletrodomestico")
            self._say("4. Remover eletrodomestico")
            self._say("5. Voltar ao menu principal")
            option = self._ask_option("Digite o numero da opcao desejada: ")
            if option is None:
                return False
            if option == 1:
                self._say(f"Eletrodomesticos no comodo {room.name}:")
                for name in room.appliance_names():
                    self._say(name)
            elif option == 2:
                self._say(f"Consumo do comodo {room.name}: {room.total_consumption():g} kWh")
            elif option == 3:
                name = self._ask("Digite o nome do eletrodomestico: ")
                if name is None:
                    return False
                raw = self._ask("Digite o consumo do eletrodomestico (kWh): ")
                if raw is None:
                    return False
                try:
                    consumption = float(raw.strip())
                except ValueError:
                    self._say("Valor invalido! Tente novamente.")
                    continue
                room.add_appliance(name, consumption)
                self._say("Eletrodomestico adicionado com sucesso!")
            elif option == 4:
                name = self._ask("Digite o nome do eletrodomestico que voce deseja remover: ")
                if name is None:
                    return False
                room.remove_appliance(name)
                self._say("Eletrodomestico removido com sucesso!")
            elif option == 5:
                self._say("Voltando ao menu principal...")
                return True
            else:
                self._say(_INVALID)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    System().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())